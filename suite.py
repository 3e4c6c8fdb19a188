import time
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import List, Any, Callable, Optional, Type

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


@dataclass
class _Case:
    func: Callable
    description: str


@dataclass
class _Result:
    description: str
    passed: bool
    error: Optional[str] = None


_registered: List[_Case] = []


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function keeps its name, so pytest finds it too."""

    def decorator(func: Callable) -> Callable:
        _registered.append(_Case(func, description))

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """equality assertion that reports both sides on failure."""
    if not (actual == expected):
        raise TestAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "expected an error"):
    """fails unless the block raises error_type (or a subclass)."""
    try:
        yield
    except error_type:
        return
    raise TestAssertionError(f"{message}: {error_type.__name__} not raised")


def run(title: str = "test run", only: Optional[str] = None) -> int:
    """executes registered tests (optionally those whose description contains `only`), prints a report and returns the failure count."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    cases = [case for case in _registered if only is None or only in case.description]
    results = [_run_case(case) for case in cases]

    for result in results:
        if result.passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {result.description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {result.description}")
            print(f"    {_c.grey}└─> {result.error}{_c.reset}")

    failures = _print_summary(results, start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _registered.clear()
    return failures


def _run_case(case: _Case) -> _Result:
    try:
        case.func()
    except TestAssertionError as e:
        return _Result(case.description, False, f"assertion failed: {e}")
    except Exception as e:
        return _Result(case.description, False, f"{type(e).__name__}: {e}")
    return _Result(case.description, True)


def _print_summary(results: List[_Result], start_time: float) -> int:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000

    total = len(results)
    passed_count = sum(1 for r in results if r.passed)
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    return failed_count

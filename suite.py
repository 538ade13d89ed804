import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

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


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """
    asserts that calling func raises error_type and returns the raised error
    so the caller can inspect its message.
    """
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise TestAssertionError(f"expected {error_type.__name__} to be raised")


def select(tests: List[Dict[str, Any]], keyword: Optional[str] = None) -> List[Dict[str, Any]]:
    """the tests whose description or function name contains keyword, ignoring case."""
    if not keyword:
        return list(tests)
    needle = keyword.lower()
    return [t for t in tests
            if needle in t['description'].lower() or needle in t['func'].__name__.lower()]


def run(title: str = "test run", verbose: bool = False, keyword: Optional[str] = None) -> int:
    """executes the registered tests matching keyword, prints a report and returns the failure count."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    tests_to_run = select(_suite_state['tests'], keyword)
    deselected = len(_suite_state['tests']) - len(tests_to_run)

    for test_item in tests_to_run:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed_count = _print_summary(start_time, deselected)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return failed_count


def parse_args(argv: List[str]) -> Dict[str, Any]:
    """reads -v (print tracebacks) and -k <keyword> or -k<keyword> (run only matching tests)."""
    options: Dict[str, Any] = {'verbose': False, 'keyword': None}
    args = iter(argv)
    for arg in args:
        if arg == '-v':
            options['verbose'] = True
        elif arg == '-k':
            options['keyword'] = next(args, None)
        elif arg.startswith('-k'):
            options['keyword'] = arg[2:]
    return options


def main(title: str) -> None:
    """run the registered tests and exit non-zero on failure, for use under __main__."""
    sys.exit(1 if run(title=title, **parse_args(sys.argv[1:])) else 0)


def _print_summary(start_time: float, deselected: int = 0) -> int:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    if deselected:
        print(f"  {_c.grey}deselected by keyword: {deselected}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count

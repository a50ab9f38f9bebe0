from pathlib import Path
import sys

from returns.io import IOFailure, IOResultE, IOSuccess
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildcpp import driver
from pybuildcpp.args import NewArgsConfig, main_args_parse
from pybuildcpp.errors import UsageError
from pybuildcpp.new import new


def pybuildcpp(args: NewArgsConfig, argv: list[str]) -> IOResultE[int]:
    match args.action:
        case "new":
            if argv:
                return IOFailure(UsageError(f"unexpected argument: '{argv[0]}'"))
            return new(args.dir).map(lambda _: 0)

        case "build":
            return IOSuccess(driver.main(argv, Path.cwd(), "pybuildcpp build"))

        case action:
            return IOFailure(UsageError(f"{action} is not implemented"))


def main(argv: list[str] | None = None) -> int:
    result = main_args_parse(sys.argv[1:] if argv is None else argv).bind(
        lambda parsed: pybuildcpp(*parsed)
    )
    if not is_successful(result):
        error = unsafe_perform_io(result.failure())
        print(f"[pybuildcpp] Error: {error}", file=sys.stderr)
        return 1
    return unsafe_perform_io(result.unwrap())


if __name__ == "__main__":
    sys.exit(main())

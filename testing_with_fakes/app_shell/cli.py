import argparse
import logging
import sys

from testing_with_fakes.adapters.bar import create_bar
from testing_with_fakes.adapters.fake_bar import FakeBar
from testing_with_fakes.app_shell.config import configure_logging, resolve_rules_path
from testing_with_fakes.components.foo import DoAThingInput, DoAThingOutput, Foo, run
from testing_with_fakes.core.ports.heavy import HeavyOperationPort
from testing_with_fakes.rules.loader import load_rules
from testing_with_fakes.rules.models import Rules

logger = logging.getLogger("cli")

SCENARIOS = ("a", "b", "c", "d")
DEFAULT_FAKE_VALUE = 7


def build_collaborator(
    scenario: str, rules: Rules, return_value: int | None
) -> HeavyOperationPort | None:
    if scenario == "a":
        return None
    if scenario == "b":
        return create_bar(rules.bar)
    if scenario == "c":
        return FakeBar(return_value if return_value is not None else rules.bar.result)
    if scenario == "d":
        return FakeBar(return_value if return_value is not None else DEFAULT_FAKE_VALUE)
    raise ValueError(f"Unknown scenario: {scenario}")


def run_scenario(scenario: str, rules: Rules, return_value: int | None = None) -> DoAThingOutput:
    foo = Foo(default_result=rules.foo.default_result)
    collaborator = build_collaborator(scenario, rules, return_value)
    return run(DoAThingInput(collaborator=collaborator), foo=foo)


def handle_scenario(rules: Rules, args: argparse.Namespace) -> None:
    out = run_scenario(args.name, rules, args.return_value)
    print(f"scenario={args.name} result={out.result} elapsed_ms={out.elapsed_ms:.1f}")


def handle_compare(rules: Rules, args: argparse.Namespace) -> None:
    real = run_scenario("b", rules)
    fake = run_scenario("c", rules, args.return_value)
    print(f"bar:      result={real.result} elapsed_ms={real.elapsed_ms:.1f}")
    print(f"fake_bar: result={fake.result} elapsed_ms={fake.elapsed_ms:.1f}")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Testing with fakes walkthrough")
    parser.add_argument("--rules", help="Path to rules.yaml")
    parser.add_argument("--delay-ms", type=non_negative_int, help="Override bar.delay_ms")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override logging.level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # scenario
    scenario_parser = subparsers.add_parser("scenario", help="Run one scenario")
    scenario_parser.add_argument(
        "name",
        choices=SCENARIOS,
        help="a: no collaborator, b: real Bar, c: FakeBar, d: FakeBar with another value",
    )
    scenario_parser.add_argument("--return-value", type=int, help="Value the fake returns")

    # compare
    compare_parser = subparsers.add_parser("compare", help="Time Bar against FakeBar")
    compare_parser.add_argument("--return-value", type=int, help="Value the fake returns")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    rules_path = resolve_rules_path(args.rules)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        return 1

    rules = load_rules(rules_path)
    if args.delay_ms is not None:
        rules.bar.delay_ms = args.delay_ms

    configure_logging(args.log_level or rules.logging.level)

    if args.command == "scenario":
        handle_scenario(rules, args)
    elif args.command == "compare":
        handle_compare(rules, args)

    return 0


if __name__ == "__main__":
    sys.exit(main())

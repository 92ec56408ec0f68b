import argparse
import sys

from environs import Env, EnvError

from fpvsetup.application.calculator import (
    DimensionsSource,
    InputSnapshot,
    recompute_outputs,
)
from fpvsetup.application.services.input_parser import InputParser
from fpvsetup.domain.constants import DEFAULT_ASPECT_ROUNDING
from fpvsetup.domain.conversions import app_per_real_from, parse_unit
from fpvsetup.domain.exceptions import UnknownUnitError
from fpvsetup.domain.models.units import Unit
from fpvsetup.domain.validators import ValidationError, validate_positive
from fpvsetup.infrastructure.monitors import probe_monitor_dimensions
from fpvsetup.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
)
from fpvsetup.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class AppSettings:
    """Settings read from the environment (and .env)."""

    def __init__(self, env: Env):
        self.aspect_rounding = env.float(
            "FPVSETUP_ASPECT_ROUNDING", DEFAULT_ASPECT_ROUNDING
        )
        validate_positive(self.aspect_rounding, "FPVSETUP_ASPECT_ROUNDING")
        self.default_unit = parse_unit(env.str("FPVSETUP_DEFAULT_UNIT", "m"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fpvsetup",
        description=(
            "Calculate first-person camera field of view from monitor size "
            "and viewing distance"
        ),
    )
    size = parser.add_argument_group("monitor size")
    size.add_argument("--width", default="", help="Monitor width")
    size.add_argument("--height", default="", help="Monitor height")
    size.add_argument("--size-unit", help="Unit of width and height (m, cm, ft, in)")
    size.add_argument("--diagonal", default="", help="Monitor diagonal")
    size.add_argument("--diagonal-unit", default="in", help="Unit of the diagonal")
    size.add_argument(
        "--aspect", default="", help="Aspect ratio as N:D (e.g. 16:9) or a number"
    )
    size.add_argument(
        "--detect",
        action="store_true",
        help="Read width and height from the monitor's EDID when not given",
    )

    viewing = parser.add_argument_group("viewing")
    viewing.add_argument(
        "--distance", default="", help="Distance from the eye to the monitor"
    )
    viewing.add_argument("--distance-unit", help="Unit of the viewing distance")
    viewing.add_argument(
        "--accurate-distance",
        default="",
        help="Distance behind the monitor that should appear at accurate scale",
    )
    viewing.add_argument("--accurate-distance-unit", help="Unit of --accurate-distance")

    units = parser.add_argument_group("application units")
    units.add_argument(
        "--app-per-real",
        default="",
        help="Length of one real unit in application units (default 1)",
    )
    units.add_argument(
        "--real-per-app",
        default="",
        help="Length of one application unit in --real-per-app-unit",
    )
    units.add_argument("--app-per-real-unit", help="Real unit for --app-per-real")
    units.add_argument(
        "--real-per-app-unit", help="Unit to express one application unit in"
    )
    units.add_argument("--move-unit", help="Unit for the camera move-back distance")

    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser


def _unit(text: str | None, default: Unit) -> Unit:
    return default if text is None else parse_unit(text)


def build_snapshot(
    args: argparse.Namespace, settings: AppSettings, input_parser: InputParser
) -> InputSnapshot:
    """Turn command line text into a parsed input snapshot."""
    has_width_height = bool(args.width.strip() or args.height.strip())
    has_diagonal_aspect = bool(args.diagonal.strip() or args.aspect.strip())
    if has_width_height and has_diagonal_aspect:
        raise ValidationError(
            "Give either --width/--height or --diagonal/--aspect, not both"
        )

    default_unit = settings.default_unit
    size_unit = _unit(args.size_unit, default_unit)
    app_per_real_unit = _unit(args.app_per_real_unit, default_unit)
    real_per_app_unit = _unit(args.real_per_app_unit, default_unit)
    app_per_real = input_parser.parse_float(args.app_per_real, "app-per-real")
    real_per_app = input_parser.parse_float(args.real_per_app, "real-per-app")
    if real_per_app is not None:
        if app_per_real is not None:
            raise ValidationError("Give either --app-per-real or --real-per-app, not both")
        app_per_real = app_per_real_from(real_per_app, real_per_app_unit, app_per_real_unit)
    elif app_per_real is None:
        app_per_real = 1.0

    snapshot = InputSnapshot(
        source=(
            DimensionsSource.DIAGONAL_ASPECT
            if has_diagonal_aspect
            else DimensionsSource.WIDTH_HEIGHT
        ),
        width=input_parser.parse_float(args.width, "width"),
        width_unit=size_unit,
        height=input_parser.parse_float(args.height, "height"),
        height_unit=size_unit,
        diagonal=input_parser.parse_float(args.diagonal, "diagonal"),
        diagonal_unit=parse_unit(args.diagonal_unit),
        aspect=input_parser.parse_aspect(args.aspect),
        distance=input_parser.parse_float(args.distance, "distance"),
        distance_unit=_unit(args.distance_unit, default_unit),
        app_per_real=app_per_real,
        app_per_real_unit=app_per_real_unit,
        real_per_app_unit=real_per_app_unit,
        move_unit=_unit(args.move_unit, default_unit),
        accurate_distance=input_parser.parse_float(
            args.accurate_distance, "accurate-distance"
        ),
        accurate_distance_unit=_unit(args.accurate_distance_unit, default_unit),
    )

    if args.detect and not (has_width_height or has_diagonal_aspect):
        dimensions = probe_monitor_dimensions()
        if dimensions is not None:
            snapshot = snapshot.with_dimensions(dimensions)
        else:
            print(
                "Monitor size could not be detected. Enter it manually.",
                file=sys.stderr,
            )

    return snapshot


def get_output_formatter(use_json: bool) -> OutputFormatter:
    """Factory for creating output formatters."""
    return JSONOutputFormatter() if use_json else ConsoleOutputFormatter()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    try:
        # Setup logging ONLY AFTER environment variables are loaded, passing env
        setup_logging(env)
        settings = AppSettings(env)
        snapshot = build_snapshot(args, settings, InputParser())
    except (ValidationError, UnknownUnitError, EnvError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Input snapshot: {snapshot}")
    outputs = recompute_outputs(snapshot, aspect_rounding=settings.aspect_rounding)
    get_output_formatter(args.json).format_result(outputs)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

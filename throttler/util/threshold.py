import logging

from throttler.data.throttle import Options, Sample, Verdict
from throttler.util import conversion

logger = logging.getLogger("throttler")


def limits_configured(options: Options) -> bool:
    return options.max_up > 0 or options.max_down > 0 or options.max_total > 0


def evaluate(options: Options, sample: Sample) -> Verdict:
    """
    Compare the counters against the limits. Any exceeded limit triggers the action.
    A limit of 0 is unset; with no limits at all the verdict is informational.
    """
    if not limits_configured(options):
        return Verdict(informational=True)

    rx = sample.r_bytes
    tx = sample.t_bytes
    reasons: list[str] = []

    if options.max_up > 0 and tx > options.max_up:
        reasons.append(
            f"upload {conversion.byte_converter(tx)} > {conversion.byte_converter(options.max_up)}"
        )

    if options.max_down > 0 and rx > options.max_down:
        reasons.append(
            f"download {conversion.byte_converter(rx)} > {conversion.byte_converter(options.max_down)}"
        )

    if options.max_total > 0 and rx + tx > options.max_total:
        reasons.append(
            f"total {conversion.byte_converter(rx + tx)} > {conversion.byte_converter(options.max_total)}"
        )

    for reason in reasons:
        logger.info(f"{options.interface}: {reason}")

    return Verdict(triggered=len(reasons) > 0, reasons=reasons)


def format_report(interface: str, sample: Sample) -> str:
    return f"Interface {interface}: Down: {sample.r_bytes}, Up: {sample.t_bytes}"

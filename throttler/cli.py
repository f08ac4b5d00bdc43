#!/usr/bin/env python3

import logging
import sys

import click
from dacite import from_dict

from throttler.data.throttle import Options
from throttler.util import conversion, log, network, system, threshold

VERSION = "0.1"

context_settings = dict(help_option_names=["-h", "--help"])
logger = logging.getLogger("throttler")

limit_names = {
    "max_up": "max upload",
    "max_down": "max download",
    "max_total": "max total",
}

epilog = """
\b
Limits are measured in bytes and may be specified with the following suffixes:
  k or K for Kilobytes, m or M for Megabytes, g or G for Gigabytes, t or T for Terabytes.
  If no suffix is specified pure bytes are assumed.
  Example: throttler eth0 -u 10G -d 10G -t 15G 'echo Throttle'

If called without any limits it simply outputs the number of bytes received
and transmitted on the specified interface.
"""


def configure_logging(debug: bool = False) -> logging.Logger:
    cache_dir = system.get_cache_directory()
    logfile = cache_dir / "throttler.log" if cache_dir else None
    return log.configure(debug=debug, name="throttler", logfile=logfile)


def parse_limit(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> int:
    """
    A malformed limit is reported and skipped, the previous value stays.
    """
    limit = 0
    for value in values:
        try:
            limit = conversion.parse_byte_quantity(value)
        except ValueError:
            print(f"Invalid argument for {limit_names[str(param.name)]}")
    return limit


def get_sample(options: Options):
    if options.use_psutil:
        return network.read_sample_psutil(interface=options.interface)
    return network.read_sample(
        interface=options.interface, netdev_file=options.netdev_file
    )


@click.command(
    name="throttler",
    help="Run ACTION once INTERFACE has used too much volume.",
    epilog=epilog,
    context_settings=context_settings,
)
@click.version_option(VERSION, "-v", "--version", message="Throttler %(version)s")
@click.option(
    "-u",
    "--max-up",
    "max_up",
    metavar="LIMIT",
    multiple=True,
    callback=parse_limit,
    help="Specify upload limit",
)
@click.option(
    "-d",
    "--max-down",
    "max_down",
    metavar="LIMIT",
    multiple=True,
    callback=parse_limit,
    help="Specify download limit",
)
@click.option(
    "-t",
    "--max-total",
    "max_total",
    metavar="LIMIT",
    multiple=True,
    callback=parse_limit,
    help="Specify limit of up- and download combined",
)
@click.option(
    "--netdev-file",
    envvar="THROTTLER_NETDEV_FILE",
    default=network.NETDEV_FILE,
    show_default=True,
    help="The interface statistics file to read",
)
@click.option(
    "--psutil",
    "use_psutil",
    default=False,
    is_flag=True,
    help="Read the counters via psutil instead of the statistics file",
)
@click.option(
    "--no-shell",
    "no_shell",
    default=False,
    is_flag=True,
    help="Split the action with shlex and run it without a shell",
)
@click.option(
    "--debug",
    envvar="THROTTLER_DEBUG",
    default=False,
    is_flag=True,
    help="Enable debug logging",
)
@click.argument("positional", nargs=-1, metavar="INTERFACE [ACTION]")
def main(
    max_up: int,
    max_down: int,
    max_total: int,
    netdev_file: str,
    use_psutil: bool,
    no_shell: bool,
    debug: bool,
    positional: tuple[str, ...],
):
    if len(positional) < 1:
        print("Missing interface specifier - call with --help to get information")
        sys.exit(1)

    options = from_dict(
        data_class=Options,
        data={
            "interface": positional[0],
            "action": positional[1] if len(positional) > 1 else "",
            "max_up": max_up,
            "max_down": max_down,
            "max_total": max_total,
            "netdev_file": netdev_file,
            "use_psutil": use_psutil,
            "shell": not no_shell,
            "debug": debug,
        },
    )

    configure_logging(debug=options.debug)
    logger.debug(f"options: {options}")
    if len(positional) > 2:
        logger.debug(f"ignoring extra arguments: {positional[2:]}")

    try:
        sample = get_sample(options)
    except network.ThrottlerError as e:
        print(e)
        sys.exit(1)

    verdict = threshold.evaluate(options=options, sample=sample)

    if verdict.informational:
        print(threshold.format_report(interface=options.interface, sample=sample))
        sys.exit(0)

    if verdict.triggered:
        if not options.action:
            logger.warning("a limit was exceeded but no action was configured")
        system.run_action(action=options.action, shell=options.shell)
    else:
        logger.info(f"{options.interface}: all limits respected")


if __name__ == "__main__":
    main()

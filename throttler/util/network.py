import logging

import psutil
from dacite import Config, from_dict

from throttler.data.throttle import Sample

logger = logging.getLogger("throttler")

NETDEV_FILE = "/proc/net/dev"

# Column order of /proc/net/dev after the "iface:" prefix
NETDEV_FIELDS = [
    "r_bytes",
    "r_packets",
    "r_errs",
    "r_drop",
    "r_fifo",
    "r_frame",
    "r_compressed",
    "r_multicast",
    "t_bytes",
    "t_packets",
    "t_errs",
    "t_drop",
    "t_fifo",
    "t_colls",
    "t_carrier",
    "t_compressed",
]


class ThrottlerError(RuntimeError):
    """Base class for errors that end a run with exit status 1."""


class StatisticsSourceError(ThrottlerError):
    """Raised when the statistics source can't be read."""

    def __init__(self, source: str):
        super().__init__(f"Error opening {source}, permissions?")
        self.source = source


class InterfaceNotFoundError(ThrottlerError):
    """Raised when the interface has no entry in the statistics source."""

    def __init__(self, interface: str, source: str):
        super().__init__(f"Could not find interface {interface} in {source}")
        self.interface = interface
        self.source = source


def _parse_netdev_line(line: str) -> tuple[str, list[int]] | None:
    if ":" not in line:
        return None

    name, data = line.split(":", 1)
    values: list[int] = []
    for token in data.split():
        if not (token.isascii() and token.isdigit()):
            break
        values.append(int(token))

    return name.strip(), values


def read_sample(interface: str, netdev_file: str = NETDEV_FILE) -> Sample:
    """
    Find the interface in /proc/net/dev (or a file in the same format) and
    return its counters. The first matching line wins.
    """
    try:
        # Interface names may hold arbitrary bytes
        fh = open(netdev_file, "r", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        logger.error(f"failed to open {netdev_file}: {e}")
        raise StatisticsSourceError(netdev_file) from e

    with fh:
        for lineno, line in enumerate(fh, start=1):
            parsed = _parse_netdev_line(line)
            if parsed is None:
                continue

            name, values = parsed
            if name != interface:
                continue

            # Received and transmitted bytes are fields 0 and 8
            if len(values) < 9:
                logger.debug(
                    f"skipping malformed entry for {interface} on line {lineno}: {line.strip()!r}"
                )
                continue

            data: dict[str, object] = {"interface": name}
            data.update(zip(NETDEV_FIELDS, values))
            sample = from_dict(data_class=Sample, data=data, config=Config(cast=[int]))
            logger.debug(
                f"{interface}: r_bytes={sample.r_bytes} t_bytes={sample.t_bytes}"
            )
            return sample

    logger.error(f"interface {interface} not found in {netdev_file}")
    raise InterfaceNotFoundError(interface, netdev_file)


def read_sample_psutil(interface: str) -> Sample:
    """
    Same as read_sample() but using psutil's per-NIC counters.
    """
    counters = psutil.net_io_counters(pernic=True)
    if interface not in counters:
        logger.error(f"interface {interface} not reported by psutil")
        raise InterfaceNotFoundError(interface, "psutil")

    nic = counters[interface]
    return from_dict(
        data_class=Sample,
        data={
            "interface": interface,
            "r_bytes": nic.bytes_recv,
            "r_packets": nic.packets_recv,
            "r_errs": nic.errin,
            "r_drop": nic.dropin,
            "t_bytes": nic.bytes_sent,
            "t_packets": nic.packets_sent,
            "t_errs": nic.errout,
            "t_drop": nic.dropout,
        },
        config=Config(cast=[int]),
    )

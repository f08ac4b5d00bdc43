from dataclasses import dataclass, field


@dataclass
class Sample:
    interface: str | None = None
    r_bytes: int = 0
    r_packets: int = 0
    r_errs: int = 0
    r_drop: int = 0
    r_fifo: int = 0
    r_frame: int = 0
    r_compressed: int = 0
    r_multicast: int = 0
    t_bytes: int = 0
    t_packets: int = 0
    t_errs: int = 0
    t_drop: int = 0
    t_fifo: int = 0
    t_colls: int = 0
    t_carrier: int = 0
    t_compressed: int = 0


@dataclass
class Options:
    interface: str = ""
    action: str = ""
    max_up: int = 0
    max_down: int = 0
    max_total: int = 0
    netdev_file: str = "/proc/net/dev"
    use_psutil: bool = False
    shell: bool = True
    debug: bool = False


@dataclass
class Verdict:
    informational: bool = False
    triggered: bool = False
    reasons: list[str] = field(default_factory=list)

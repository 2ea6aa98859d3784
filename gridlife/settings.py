from .constants import DEFAULT_DEVICE, DEFAULT_ENGINE, ENGINES
from .model import resolve_device


class Settings:
    """Run configuration gathered from the command line and the input header."""

    def __init__(self, generations, device=DEFAULT_DEVICE, engine=DEFAULT_ENGINE,
                 verbose=False, show=False):
        if generations < 0:
            raise ValueError("generations must be non-negative")
        if engine not in ENGINES:
            raise ValueError(f"engine must be one of {ENGINES}, got {engine!r}")
        self.generations = generations
        self.requested_device = device
        self.device = resolve_device(device)
        self.engine = engine
        self.verbose = verbose
        self.show = show

    @property
    def device_fallback(self):
        """True when CUDA was requested but the CPU will be used."""
        return self.requested_device != self.device

    @classmethod
    def from_args(cls, args, generations):
        # --generations overrides the count from the input header
        if args.generations is not None:
            generations = args.generations
        return cls(
            generations=generations,
            device=args.device,
            engine=args.engine,
            verbose=args.verbose,
            show=args.show,
        )

    def __repr__(self):
        return (f"Settings(generations={self.generations}, device={self.device!r}, "
                f"engine={self.engine!r}, verbose={self.verbose}, show={self.show})")

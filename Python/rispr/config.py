from typing import List, Optional, Sequence, Tuple

DEFAULT_OPERATORS: Tuple[str, ...] = ("+", "-", "*", "/")

MODES = ("print", "eval")

class RisprConfig:
    def __init__(self, mode: str = "print", strict: bool = True,
                 operators: Sequence[str] = DEFAULT_OPERATORS, debug: bool = False):
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        if not operators:
            raise ValueError("Operator alphabet must not be empty")
        self.mode = mode
        self.strict = strict
        self.operators = tuple(operators)
        self.debug = debug

    @property
    def evaluate(self) -> bool:
        return self.mode == "eval"

    def __repr__(self):
        return (f"RisprConfig(mode={self.mode!r}, strict={self.strict}, "
                f"operators={self.operators!r}, debug={self.debug})")

    @staticmethod
    def default() -> 'RisprConfig':
        return RisprConfig()

    @staticmethod
    def from_args(args: List[str]) -> Tuple['RisprConfig', Optional[str]]:
        """Split command-line words into a config and an optional input path.

        Recognised words are ``eval``, ``lenient`` and ``debug``; the first
        other word is the input path. A second unrecognised word is an error.
        """
        options = {"eval", "lenient", "debug"}
        paths = [a for a in args if a not in options]
        if len(paths) > 1:
            raise ValueError(f"Unexpected arguments: {' '.join(paths[1:])}")
        config = RisprConfig(
            mode="eval" if "eval" in args else "print",
            strict="lenient" not in args,
            debug="debug" in args,
        )
        return config, (paths[0] if paths else None)

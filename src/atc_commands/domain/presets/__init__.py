# Built-in command scheme presets

from atc_commands.domain.presets.atc_trainer import ATC_TRAINER
from atc_commands.domain.presets.vice import VICE

BUILTIN_SCHEMES = (ATC_TRAINER, VICE)

__all__ = ["ATC_TRAINER", "BUILTIN_SCHEMES", "VICE"]

import logging
from dataclasses import dataclass, replace
from typing import Any, TypeVar

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _SpriteSetting(_DefaultOverride):
    """Setting for reading and writing sprite files

    strict: bool (default True) -
        if set to True, throws error when palette exceeds 65535 colors,
        otherwise log warning and write only the first 65535 colors

    logger: logger to report diagnostics to
    """

    strict: bool = True
    logger: logging.Logger = logging.getLogger('goldspr')

from __future__ import annotations

from collections.abc import Mapping

from PySubtitleParser.SettingsType import SettingType, SettingsError, SettingsType

default_settings : dict[str, SettingType] = {
    'default_encoding': 'utf-8',
    'default_frame_rate': 25.0,
    'excerpt_length': 500,
    'max_header_lines': 20,
    'ticks_per_millisecond': 10000,
}

class Options(SettingsType):
    """
    Settings for subtitle parsing, with defaults for anything not specified
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__(default_settings)
        if settings:
            self.update(SettingsType(settings))
        if kwargs:
            self.update(kwargs)

        self._validate()

    @property
    def default_encoding(self) -> str:
        return self.get_str('default_encoding') or 'utf-8'

    @property
    def default_frame_rate(self) -> float:
        value = self.get_float('default_frame_rate')
        return 25.0 if value is None else value

    @property
    def excerpt_length(self) -> int:
        value = self.get_int('excerpt_length')
        return 500 if value is None else value

    @property
    def max_header_lines(self) -> int:
        value = self.get_int('max_header_lines')
        return 20 if value is None else value

    @property
    def ticks_per_millisecond(self) -> int:
        value = self.get_int('ticks_per_millisecond')
        return 10000 if value is None else value

    def _validate(self) -> None:
        if self.default_frame_rate <= 0:
            raise SettingsError(f"default_frame_rate must be positive, got {self.default_frame_rate}")
        if self.excerpt_length < 0:
            raise SettingsError(f"excerpt_length cannot be negative, got {self.excerpt_length}")
        if self.max_header_lines < 1:
            raise SettingsError(f"max_header_lines must be at least 1, got {self.max_header_lines}")
        if self.ticks_per_millisecond <= 0:
            raise SettingsError(f"ticks_per_millisecond must be positive, got {self.ticks_per_millisecond}")

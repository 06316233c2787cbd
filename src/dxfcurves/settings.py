## tessellation settings for dxfcurves
## Copyright (c) 2024 dxfcurves contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Fidelity budget and scaling settings for tessellation.

Settings are immutable.  They can be built directly, from a plain mapping
with :meth:`TessellationSettings.from_mapping`, or from a YAML file with
:func:`load_settings`::

    tessellation:
      scale_factor: 1.0
      max_chord_length: 100
      max_angle_per_segment_deg: 15
      samples_per_spline_segment: 100
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

logger = logging.getLogger(__name__)

__all__ = [
    'DEFAULT_SCALE_FACTOR',
    'DEFAULT_MAX_CHORD_LENGTH',
    'DEFAULT_MAX_ANGLE_PER_SEGMENT',
    'DEFAULT_SAMPLES_PER_SPLINE_SEGMENT',
    'TessellationSettings',
    'DEFAULT_SETTINGS',
    'load_settings',
]

DEFAULT_SCALE_FACTOR = 1.0
DEFAULT_MAX_CHORD_LENGTH = 100.0
DEFAULT_MAX_ANGLE_PER_SEGMENT = math.radians(15.0)
DEFAULT_SAMPLES_PER_SPLINE_SEGMENT = 100


@dataclass(frozen=True)
class TessellationSettings:
    """Scale and sampling budget shared by all curve samplers.

    ``max_chord_length`` is in document units (it is multiplied by
    ``scale_factor`` when applied), ``max_angle_per_segment`` in radians.
    ``flatten_z`` forces z to zero for point entities.
    """

    scale_factor: float = DEFAULT_SCALE_FACTOR
    max_chord_length: float = DEFAULT_MAX_CHORD_LENGTH
    max_angle_per_segment: float = DEFAULT_MAX_ANGLE_PER_SEGMENT
    samples_per_spline_segment: int = DEFAULT_SAMPLES_PER_SPLINE_SEGMENT
    flatten_z: bool = True

    def __post_init__(self) -> None:
        for name in ('scale_factor', 'max_chord_length', 'max_angle_per_segment'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f'{name} must be a number, got {value!r}')
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f'{name} must be finite and positive, got {value!r}')
        samples = self.samples_per_spline_segment
        if isinstance(samples, bool) or not isinstance(samples, int) or samples < 1:
            raise ValueError(
                f'samples_per_spline_segment must be an integer >= 1, got {samples!r}')

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'TessellationSettings':
        """Build settings from a mapping of field names to values.

        ``max_angle_per_segment_deg`` may replace ``max_angle_per_segment``.
        """

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key == 'max_angle_per_segment_deg':
                if 'max_angle_per_segment' in data:
                    raise ValueError(
                        'give max_angle_per_segment or max_angle_per_segment_deg, not both')
                values['max_angle_per_segment'] = math.radians(float(value))
            elif key in known:
                values[key] = value
            else:
                raise ValueError(f'unknown tessellation setting: {key}')
        return cls(**values)


DEFAULT_SETTINGS = TessellationSettings()


def load_settings(path: Path | str) -> TessellationSettings:
    """Load settings from a YAML file.

    The file may hold the settings at top level or under a
    ``tessellation`` key.  An empty file gives the defaults.
    """

    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f'settings file not found: {settings_path}')

    with settings_path.open('r', encoding='utf-8') as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f'settings must be a mapping, got {type(data)!r}')

    section = data.get('tessellation', data)
    if not isinstance(section, dict):
        raise ValueError(f'tessellation section must be a mapping, got {type(section)!r}')

    settings = TessellationSettings.from_mapping(section)
    logger.info('Tessellation settings loaded from %s', settings_path)
    return settings

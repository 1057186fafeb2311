"""Configuration for diagnostic output of boundary vectors.

Options are plain dataclasses validated through OmegaConf, so they can be
built from a dict, a YAML-loaded ``DictConfig`` or a solver config subtree.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from omegaconf import DictConfig, OmegaConf

log = logging.getLogger(__name__)


@dataclass
class PrintOptions:
    """Formatting used when dumping raw storage with ``BoundaryVector.print``."""

    precision: int = 8
    threshold: int = 1000  # summarize arrays longer than this
    linewidth: int = 75
    separator: str = " "


def load_print_options(
    overrides: Optional[Union[Mapping[str, Any], DictConfig]] = None,
) -> PrintOptions:
    """Merge ``overrides`` onto the default print options.

    Parameters
    ----------
    overrides : mapping or DictConfig, optional
        Keys must be fields of :class:`PrintOptions`; values are type-checked.

    Returns
    -------
    PrintOptions
        A new options object.

    Raises
    ------
    omegaconf.errors.ConfigKeyError
        If ``overrides`` contains an unknown key.
    omegaconf.errors.ValidationError
        If a value cannot be converted to the field's type.
    """
    cfg = OmegaConf.structured(PrintOptions)
    if overrides is not None:
        cfg = OmegaConf.merge(cfg, overrides)
    options = OmegaConf.to_object(cfg)
    log.debug("Print options: %s", options)
    return options

"""
Module to validate values in a loaded config against a parallel validation
config. Each leaf of the validation config is a dict with a "type" key
(number, int, float, str or bool) and optional bounds.
"""

# Standard
from typing import Any, Dict, List, Optional, Tuple

# First Party
import aconfig
import alog

# Local
from .. import constants
from ..utils import nested_get

log = alog.use_channel("CONFG")

## Public ######################################################################


def get_invalid_params(
    config: aconfig.Config,
    validation_config: aconfig.Config,
) -> List[str]:
    """Get a list of any params that are invalid

    Args:
        config:  aconfig.Config
            The parsed config with any override values
        validation_config:  aconfig.Config
            The parallel config holding validation setup

    Returns:
        invalid_params:  List[str]
            A list of all nested keys for parameters that fail validation
    """
    invalid_params = []
    for val_key, param in _parse_validation_config(validation_config).items():
        if not param.validate(nested_get(config, val_key)):
            log.warning("Found invalid config key [%s]", val_key)
            invalid_params.append(val_key)
    return invalid_params


## Implementation ##############################################################


class _Parameter:  # pylint: disable=too-few-public-methods
    """A single validated parameter with a type and optional bounds. For str
    parameters the bounds apply to the length of the value.
    """

    # Map from type key to the accepted python types
    TYPES: Dict[str, Tuple[type, ...]] = {
        "number": (int, float),
        "int": (int,),
        "float": (float,),
        "str": (str,),
        "bool": (bool,),
    }

    def __init__(
        self,
        type_key: str,
        *,
        optional: bool = False,
        min: Optional[float] = None,  # pylint: disable=redefined-builtin
        max: Optional[float] = None,  # pylint: disable=redefined-builtin
        min_len: Optional[int] = None,
        max_len: Optional[int] = None,
    ):
        assert type_key in self.TYPES, f"Unsupported parameter type: {type_key}"
        self.type_key = type_key
        self.optional = optional
        self._min = min
        self._max = max
        self._min_len = min_len
        self._max_len = max_len

    def validate(self, value: Any) -> bool:
        """Run the validation for a read value

        Args:
            value:  Any
                The value to validate against this parameter

        Returns:
            valid:  bool
                True if the value is valid, False otherwise
        """
        if self.optional and value is None:
            return True

        # bool is a subclass of int, so it is only accepted for bool params
        if isinstance(value, bool) and self.type_key != "bool":
            log.warning("Invalid type <%s>", type(value))
            return False
        if not isinstance(value, self.TYPES[self.type_key]):
            log.warning("Invalid type <%s>", type(value))
            return False

        if self.type_key == "str":
            valid = (self._min_len is None or len(value) >= self._min_len) and (
                self._max_len is None or len(value) <= self._max_len
            )
        elif self.type_key == "bool":
            valid = True
        else:
            valid = (self._min is None or value >= self._min) and (
                self._max is None or value <= self._max
            )
        if not valid:
            log.warning("Invalid value [%s]", value)
        return valid


def _parse_validation_config(
    validation_config: aconfig.Config,
    prefix_parts: Optional[List[str]] = None,
) -> Dict[str, _Parameter]:
    """Recursively parse the validation config into a dict of nested keys
    pointing to _Parameter instances
    """
    output_dict = {}
    prefix_parts = prefix_parts or []
    for key, val in validation_config.items():
        if not isinstance(val, dict):
            continue
        key_parts = prefix_parts + [key]
        nested_key = constants.NESTED_DICT_DELIM.join(key_parts)
        if isinstance(val.get("type"), str):
            log.debug3("Found parameter at %s: %s", nested_key, val)
            param_args = dict(val)
            output_dict[nested_key] = _Parameter(param_args.pop("type"), **param_args)
        else:
            log.debug3("Recursing into %s", nested_key)
            output_dict.update(_parse_validation_config(val, prefix_parts=key_parts))
    return output_dict

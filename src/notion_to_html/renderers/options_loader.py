"""YAML loading and validation of styling options.

Styling options can live next to an application's templates instead of in
code. The file is a mapping from block type to option slice:

    paragraph:
      class: "text-lg leading-relaxed"
    heading_1:
      class: "text-4xl"
      override_class: true
    image:
      data:
        controller: zoom
"""

from typing import Any, Dict

import yaml

from ..notion_api.errors import ConfigError, FilesystemError
from .css import BLOCK_TYPES, EXTRA_OPTION_KEYS


class RenderOptionsLoader:
    """Loads styling options from YAML files and validates their shape."""

    # Keys allowed inside a single option slice
    ALLOWED_SLICE_KEYS = {'class', 'override_class', 'data', 'language'}

    @classmethod
    def load(cls, options_path: str) -> Dict[str, Dict[str, Any]]:
        """Load and validate styling options from a YAML file.

        Args:
            options_path: Path to the YAML file

        Returns:
            Mapping of block type to option slice; empty for an empty file

        Raises:
            FilesystemError: If the file cannot be read
            ConfigError: If the YAML is malformed or fails validation
        """
        try:
            with open(options_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(options_path, 'read', 'Options file not found')
        except PermissionError:
            raise FilesystemError(options_path, 'read', 'Permission denied')
        except OSError as e:
            raise FilesystemError(options_path, 'read', str(e))

        try:
            options = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if options is None:
            return {}

        return cls.parse(options)

    @classmethod
    def parse(cls, options: Any) -> Dict[str, Dict[str, Any]]:
        """Validate an already-decoded options mapping.

        Raises:
            ConfigError: If a block type or slice value is invalid
        """
        if not isinstance(options, dict):
            raise ConfigError(
                f"Options must be a YAML dictionary, got {type(options).__name__}"
            )

        known_keys = set(BLOCK_TYPES) | set(EXTRA_OPTION_KEYS)
        parsed: Dict[str, Dict[str, Any]] = {}

        for block_type, slice_ in options.items():
            if block_type not in known_keys:
                raise ConfigError(f"Unknown block type '{block_type}'", str(block_type))

            if slice_ is None:
                parsed[block_type] = {}
                continue

            if not isinstance(slice_, dict):
                raise ConfigError("Options for a block type must be a dictionary", block_type)

            unknown = set(slice_.keys()) - cls.ALLOWED_SLICE_KEYS
            if unknown:
                raise ConfigError(
                    f"Unknown option keys: {', '.join(sorted(str(k) for k in unknown))}",
                    block_type
                )

            if 'class' in slice_ and not isinstance(slice_['class'], str):
                raise ConfigError("Field 'class' must be a string", f'{block_type}.class')

            if 'override_class' in slice_ and not isinstance(slice_['override_class'], bool):
                raise ConfigError("Field 'override_class' must be true or false", f'{block_type}.override_class')

            if 'language' in slice_ and not isinstance(slice_['language'], str):
                raise ConfigError("Field 'language' must be a string", f'{block_type}.language')

            if 'data' in slice_:
                data = slice_['data']
                if not isinstance(data, dict):
                    raise ConfigError("Field 'data' must be a dictionary", f'{block_type}.data')
                slice_ = {**slice_, 'data': {str(k): str(v) for k, v in data.items()}}

            parsed[block_type] = dict(slice_)

        return parsed

import copy
import importlib.resources
import yaml
from typing import Any, Dict
from nbitk.config import Config

from lastdb_args.constants import ChildTableType, SequenceFormat


class ValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


class LastdbConfig(Config):
    """
    Schema-driven configuration record for lastdb.

    The schema (schema.yaml, shipped with this package) lists every option
    setting with its type and default value. A new instance holds exactly
    those defaults; option handlers then overwrite or extend them in command
    line order, and the record is frozen with finalize() once the positional
    arguments have been extracted.

    Examples:
        >>> config = LastdbConfig()
        >>> config.get('index_step')
        0
        >>> config.set('is_protein', True)
        >>> config.get('is_protein')
        True
    """

    ENUM_TYPES = {
        'ChildTableType': ChildTableType,
        'SequenceFormat': SequenceFormat,
    }

    def __init__(self, schema_package: str = "lastdb_args.config"):
        """
        Initialize the configuration with the schema defaults.

        :param schema_package: Package containing the schema.yaml file
        """
        super().__init__()
        self.schema_package = schema_package
        self.schema: Dict[str, Any] = {}
        self.finalized = False
        self._load_schema()
        self._initialize_with_defaults()

    def _load_schema(self) -> None:
        """Load the schema from the package resources."""
        resource = importlib.resources.files(self.schema_package).joinpath("schema.yaml")
        try:
            with resource.open("r") as f:
                self.schema = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Schema file not found in package {self.schema_package}")
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing schema file: {e}")

        self._validate_schema()

    def _validate_schema(self) -> None:
        """Validate that every schema entry names a known type and has a default."""
        valid_types = ['str', 'int', 'bool', 'list'] + list(self.ENUM_TYPES)
        for key, spec in self.schema.items():
            if not isinstance(spec, dict):
                raise ValidationError(f"Schema entry '{key}' must be a dictionary")
            if spec.get('type') not in valid_types:
                raise ValidationError(f"Schema entry '{key}' has invalid type '{spec.get('type')}'. "
                                      f"Valid types: {valid_types}")
            if 'default' not in spec:
                raise ValidationError(f"Schema entry '{key}' missing required 'default' field")
            if 'choices' in spec and not isinstance(spec['choices'], list):
                raise ValidationError(f"Schema entry '{key}' choices must be a list")

    def _initialize_with_defaults(self) -> None:
        """Populate the record with the default value of every schema entry."""
        self.config_data = {}
        self.initialized = True
        for key, spec in self.schema.items():
            self.config_data[key] = self._validate_value(key, copy.deepcopy(spec['default']), spec)

    def defaults(self) -> Dict[str, Any]:
        """
        Return the default value of every schema entry, converted to its type.

        :return: Mapping of configuration key to default value
        """
        return {key: self._validate_value(key, copy.deepcopy(spec['default']), spec)
                for key, spec in self.schema.items()}

    def load_config(self, config_path: str) -> None:
        """
        Override parent method to prevent loading external config files.

        :param config_path: Path to config file (not used)
        :raises ValidationError: Always, lastdb is configured on the command line only
        """
        raise ValidationError("Loading external configuration files is not supported. "
                              "Use command line options instead.")

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value with validation.

        :param key: Configuration key
        :param value: Configuration value
        :raises ValidationError: If the key is unknown, the value is invalid or the record is finalized
        """
        if self.finalized:
            raise ValidationError(f"Configuration is finalized, cannot set '{key}'")
        if key not in self.schema:
            raise ValidationError(f"Unknown configuration key: {key}")
        self.config_data[key] = self._validate_value(key, value, self.schema[key])

    def append(self, key: str, value: str) -> None:
        """
        Append a value to a list-valued configuration key.

        :param key: Configuration key of type 'list'
        :param value: Value to append
        :raises ValidationError: If the key is not a list or the record is finalized
        """
        if self.finalized:
            raise ValidationError(f"Configuration is finalized, cannot append to '{key}'")
        if self.schema.get(key, {}).get('type') != 'list':
            raise ValidationError(f"Configuration key '{key}' is not a list")
        self.config_data[key].append(str(value))

    def _validate_value(self, key: str, value: Any, spec: Dict[str, Any]) -> Any:
        """
        Validate a configuration value against its schema specification.

        :param key: Configuration key name
        :param value: Value to validate
        :param spec: Schema specification for the key
        :return: Validated and converted value
        :raises ValidationError: If validation fails
        """
        if value is None:
            return None

        expected_type = spec['type']
        try:
            if expected_type == 'str':
                converted_value = str(value)
            elif expected_type == 'int':
                converted_value = int(value)
            elif expected_type == 'bool':
                converted_value = bool(value)
            elif expected_type == 'list':
                converted_value = [str(v) for v in value]
            else:
                converted_value = self.ENUM_TYPES[expected_type](int(value))
        except (ValueError, TypeError) as e:
            raise ValidationError(f"Cannot convert value '{value}' to type '{expected_type}' "
                                  f"for key '{key}': {e}")

        if 'choices' in spec and converted_value not in spec['choices']:
            raise ValidationError(f"Invalid value '{converted_value}' for key '{key}'. "
                                  f"Valid choices: {spec['choices']}")

        return converted_value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        :param key: Configuration key
        :param default: Default value if key not found
        :return: Configuration value
        """
        return self.config_data.get(key, default)

    def finalize(self) -> None:
        """Freeze the record; later calls to set() or append() raise ValidationError."""
        self.finalized = True

    def as_dict(self) -> Dict[str, Any]:
        """
        Return a detached copy of the configuration values.

        :return: Mapping of configuration key to value
        """
        return copy.deepcopy(self.config_data)

    def __repr__(self):
        return f"LastdbConfig(finalized={self.finalized}, config_data={self.config_data})"

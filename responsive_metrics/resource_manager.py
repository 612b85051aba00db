# responsive_metrics/resource_manager.py
import os
import sys
import json
import math
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple, get_type_hints, is_typeddict

from .constants import DEFAULT_TABLES
from .errors import ConfigValidationError
from .schemas import CategoryTable, ResponsiveTables, ResponsiveTablesFileTypedDict

TABLES_FILENAME = "responsive_tables.json"
CATEGORY_KEYS = ("mobile", "tablet", "desktop", "large_desktop")


class ResourceManager:
    """
    The Librarian of Tables.
    Loads and VALIDATES the optional tables override file and folds it onto
    the built-in defaults. The result is a new frozen ResponsiveTables; the
    defaults themselves are never touched.
    """
    def __init__(self, app_root: Optional[str] = None):
        """
        If app_root is not provided, the project root is taken to be the parent
        of the 'responsive_metrics' package, with 'data' as a sibling.
        """
        if app_root is None:
            app_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

        self.app_root = app_root
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"ResourceManager initialized with app_root: {self.app_root}")

    def _discover_data_directory(self) -> Optional[str]:
        """Finds the 'data' directory, whether in development or a bundled app."""
        if hasattr(sys, '_MEIPASS'):
            bundle_data_path = os.path.join(sys._MEIPASS, 'data')
            if os.path.isdir(bundle_data_path):
                self.logger.info(f"Found bundled data directory: {bundle_data_path}")
                return bundle_data_path

        root_data_path = os.path.join(self.app_root, 'data')
        if os.path.isdir(root_data_path):
            return root_data_path
        return None

    def load_tables(self, path: Optional[str] = None) -> ResponsiveTables:
        """
        Loads the tables override at `path` (or data/responsive_tables.json),
        validates it, and returns the merged tables. Falls back to the defaults
        when no override file exists; an explicit `path` must exist.
        """
        if path is None:
            data_dir = self._discover_data_directory()
            candidate = os.path.join(data_dir, TABLES_FILENAME) if data_dir else None
            if not candidate or not os.path.isfile(candidate):
                self.logger.info("No tables override found. Using built-in responsive tables.")
                return DEFAULT_TABLES
            path = candidate
        elif not os.path.isfile(path):
            raise FileNotFoundError(f"Tables override file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Failed to load '{path}': Invalid JSON syntax - {e}")
            raise ConfigValidationError(f"Invalid JSON in '{path}': {e}", [str(e)]) from e

        tables = self.tables_from_dict(data, source=path)
        self.logger.info(f"Loaded responsive tables override from '{path}'.")
        return tables

    def tables_from_dict(self, data: Any, source: str = "<dict>") -> ResponsiveTables:
        """Validates a raw override mapping and merges it onto DEFAULT_TABLES."""
        is_valid, errors = self._validate_data(data, ResponsiveTablesFileTypedDict)
        if is_valid:
            errors = self._check_values(data)
        if errors:
            for error in errors:
                self.logger.error(f"Schema validation FAILED for '{source}': {error}")
            raise ConfigValidationError(f"Tables override '{source}' failed validation.", errors)

        overrides: Dict[str, Any] = {}
        for key, values in data.items():
            if key == "breakpoints":
                overrides[key] = replace(DEFAULT_TABLES.breakpoints, **{k: float(v) for k, v in values.items()})
            else:
                base: CategoryTable = getattr(DEFAULT_TABLES, key)
                overrides[key] = replace(base, **values)
        return replace(DEFAULT_TABLES, **overrides)

    def _check_values(self, data: Dict[str, Any]) -> List[str]:
        """Range checks the TypedDict validator cannot express."""
        errors = []
        for key, values in data.items():
            for tier, value in values.items():
                if not math.isfinite(value):
                    errors.append(f"Value at 'root.{key}.{tier}' must be a finite number, got {value}")
                elif value <= 0:
                    errors.append(f"Value at 'root.{key}.{tier}' must be positive, got {value}")
                elif key == "dialog_max_width_fraction" and value > 1:
                    errors.append(f"Value at 'root.{key}.{tier}' must not exceed 1, got {value}")

        merged = replace(DEFAULT_TABLES.breakpoints, **data.get("breakpoints", {}))
        ordered = [getattr(merged, k) for k in CATEGORY_KEYS]
        if any(lower >= upper for lower, upper in zip(ordered, ordered[1:])):
            errors.append(f"Breakpoints must be strictly increasing, got {ordered}")

        scale = replace(DEFAULT_TABLES.base_scale, **data.get("base_scale", {}))
        scales = [getattr(scale, k) for k in CATEGORY_KEYS]
        if any(lower > upper for lower, upper in zip(scales, scales[1:])):
            errors.append(f"Base scale must not decrease with the category, got {scales}")
        return errors

    def _validate_data(self, data: Any, schema: type) -> Tuple[bool, List[str]]:
        """
        Recursively validates data against a TypedDict schema. It checks for
        missing keys, unknown keys, and incorrect types in nested structures.
        """
        errors = []

        def check_typed_dict(d: Any, s: type, path: str):
            if not isinstance(d, dict):
                errors.append(f"Invalid type at '{path}': Expected a dictionary for '{s.__name__}', but got {type(d).__name__}.")
                return

            hints = get_type_hints(s)
            for key in getattr(s, '__required_keys__', frozenset()):
                if key not in d:
                    errors.append(f"Missing required key at '{path}': '{key}'")

            for key, value in d.items():
                if key not in hints:
                    errors.append(f"Unknown key at '{path}': '{key}'")
                    continue
                check_value(value, hints[key], f"{path}.{key}")

        def check_value(v: Any, t: Any, path: str):
            if is_typeddict(t):
                check_typed_dict(v, t, path)
            elif isinstance(v, bool) or not isinstance(v, t):
                # Allow int to be validated as float, a common and safe case
                if t is float and isinstance(v, int) and not isinstance(v, bool):
                    return
                errors.append(f"Type mismatch at '{path}': Expected {t.__name__}, got {type(v).__name__}.")

        check_typed_dict(data, schema, 'root')
        return not errors, errors


def load_tables(path: Optional[str] = None) -> ResponsiveTables:
    """Module-level shortcut for ResourceManager().load_tables()."""
    return ResourceManager().load_tables(path)

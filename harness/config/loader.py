"""Configuration file loader with state machine."""

import hashlib
import json
import time
from pathlib import Path

import structlog
import yaml

from harness.config.constants import (
    COMPONENT_CONFIG,
    FIELD_FILE,
    FIELD_ROOT,
    JSON_SUFFIXES,
    YAML_SUFFIXES,
)
from harness.config.defaults import BUILTIN_DEFAULTS, HarnessDefaults
from harness.config.errors import ConfigError, MalformedFieldError
from harness.config.overrides import apply_overrides
from harness.config.resolved import ResolvedConfig
from harness.config.resolver import ConfigResolver
from harness.config.state_machine import ConfigState, ConfigStateMachine


logger = structlog.get_logger()


class ConfigLoader:
    """Loads a configuration file and resolves it.

    Implements a state machine for configuration loading:
    UNLOADED -> LOADING -> VALIDATED -> READY

    A loader handles exactly one file; the resolved configuration is
    immutable once READY.
    """

    def __init__(
        self, run_id: str, defaults: HarnessDefaults = BUILTIN_DEFAULTS
    ) -> None:
        """Initialize the loader.

        Args:
            run_id: Unique identifier for the current run.
            defaults: Defaults table handed to the resolver.
        """
        self._run_id = run_id
        self._resolver = ConfigResolver(defaults)
        self._state_machine = ConfigStateMachine()
        self._file_path: str | None = None
        self._file_checksum: str | None = None
        self._validation_errors: list[dict[str, str]] = []
        self._validation_duration_ms: float = 0

    @property
    def state(self) -> ConfigState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def file_checksum(self) -> str | None:
        """Get SHA-256 checksum of the loaded file."""
        return self._file_checksum

    @property
    def validation_errors(self) -> list[dict[str, str]]:
        """Get validation errors if any."""
        return self._validation_errors.copy()

    @property
    def validation_duration_ms(self) -> float:
        """Get validation duration in milliseconds."""
        return self._validation_duration_ms

    def _read_raw(self, file_path: Path) -> dict[object, object]:
        """Read and parse a YAML or JSON config file.

        Raises:
            FileNotFoundError: If file does not exist.
            MalformedFieldError: If the suffix is unsupported or the
                document is not a mapping.
            yaml.YAMLError: If YAML parsing fails.
            json.JSONDecodeError: If JSON parsing fails.
            UnicodeDecodeError: If the file is not valid UTF-8.
            OSError: If the file cannot be read.
        """
        suffix = file_path.suffix.lower()
        if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
            raise MalformedFieldError(
                FIELD_FILE, f"unsupported config file type '{suffix or file_path.name}'"
            )

        content_bytes = file_path.read_bytes()
        self._file_checksum = hashlib.sha256(content_bytes).hexdigest()
        content_str = content_bytes.decode("utf-8")

        if suffix in YAML_SUFFIXES:
            parsed = yaml.safe_load(content_str)
        else:
            parsed = json.loads(content_str) if content_str.strip() else None

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise MalformedFieldError(
                FIELD_ROOT, f"expected a mapping, got {type(parsed).__name__}"
            )
        return parsed

    def load(
        self,
        config_path: Path,
        *,
        environment: str | None = None,
        preset: str | None = None,
    ) -> ResolvedConfig:
        """Load, override and resolve a configuration file.

        Args:
            config_path: Path to a .yaml, .yml or .json config file.
            environment: Optional environment override.
            preset: Optional preset override.

        Returns:
            Resolved configuration.

        Raises:
            ConfigError: If resolution fails.
            ConfigStateError: If called in invalid state.
        """
        start_time = time.perf_counter()
        self._state_machine.transition(ConfigState.LOADING)
        self._file_path = str(config_path)

        log = logger.bind(
            run_id=self._run_id,
            component=COMPONENT_CONFIG,
            phase=ConfigState.LOADING.value,
        )

        try:
            log.info("loading_config_file", file_path=str(config_path))
            raw = self._read_raw(config_path)
            log.info(
                "config_file_loaded",
                file_path=str(config_path),
                file_sha256=self._file_checksum,
                key_count=len(raw),
            )
            return self._finish(
                apply_overrides(raw, environment=environment, preset=preset),
                start_time,
                log,
            )

        except ConfigError as e:
            self._record_error(e.location, e.message, e.kind.value, log)
            raise

        except FileNotFoundError as e:
            self._record_error("file", str(e), "file_not_found", log)
            raise

        except yaml.YAMLError as e:
            self._record_error("yaml", str(e), "yaml_parse_error", log)
            raise

        except json.JSONDecodeError as e:
            self._record_error("json", str(e), "json_parse_error", log)
            raise

        except (UnicodeDecodeError, OSError) as e:
            self._record_error("file", str(e), "file_read_error", log)
            raise

    def load_raw(
        self,
        raw: dict[object, object],
        *,
        environment: str | None = None,
        preset: str | None = None,
    ) -> ResolvedConfig:
        """Resolve an inline raw configuration instead of a file.

        Args:
            raw: Raw configuration mapping.
            environment: Optional environment override.
            preset: Optional preset override.

        Returns:
            Resolved configuration.
        """
        start_time = time.perf_counter()
        self._state_machine.transition(ConfigState.LOADING)
        log = logger.bind(
            run_id=self._run_id,
            component=COMPONENT_CONFIG,
            phase=ConfigState.LOADING.value,
        )
        try:
            return self._finish(
                apply_overrides(raw, environment=environment, preset=preset),
                start_time,
                log,
            )
        except ConfigError as e:
            self._record_error(e.location, e.message, e.kind.value, log)
            raise

    def _finish(
        self,
        raw: dict[object, object],
        start_time: float,
        log: structlog.stdlib.BoundLogger,
    ) -> ResolvedConfig:
        resolved = self._resolver.resolve(raw)
        self._state_machine.transition(ConfigState.VALIDATED)

        self._validation_duration_ms = (time.perf_counter() - start_time) * 1000
        log.info(
            "config_validation_complete",
            phase=ConfigState.VALIDATED.value,
            validation_error_count=0,
            config_validation_duration_ms=self._validation_duration_ms,
        )

        self._state_machine.transition(ConfigState.READY)
        log.info(
            "config_ready",
            phase=ConfigState.READY.value,
            environment=resolved.environment,
            preset=resolved.preset,
            config_checksum=resolved.compute_checksum(),
        )
        return resolved

    def _record_error(
        self,
        loc: str,
        msg: str,
        error_type: str,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        self._state_machine.fail()
        self._validation_errors.append({"loc": loc, "msg": msg, "type": error_type})
        log.error(
            "config_resolution_failed",
            phase=ConfigState.FAILED.value,
            error_type=error_type,
            error=msg,
            location=loc,
        )

    def get_validation_summary(self) -> dict[str, object]:
        """Get a summary of the loading process.

        Returns:
            Dictionary with validation summary.
        """
        return {
            "run_id": self._run_id,
            "state": self._state_machine.state.value,
            "file_path": self._file_path,
            "file_checksum": self._file_checksum,
            "validation_error_count": len(self._validation_errors),
            "validation_errors": self._validation_errors,
            "validation_duration_ms": self._validation_duration_ms,
        }

    def get_validation_summary_json(self) -> str:
        """Get validation summary as JSON string with stable ordering."""
        return json.dumps(self.get_validation_summary(), sort_keys=True, indent=2)

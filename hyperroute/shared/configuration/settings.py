"""Settings dataclasses for HyperRoute."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Reference cost constants of the negotiated-congestion model
DEFAULT_RIPPING_COST = 5000.0
DEFAULT_CONGESTION_COST_MULTIPLIER = 10.0
DEFAULT_MAX_ITERATIONS = 100_000

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RoutingSettings:
    """Cost model and solver limits."""
    ripping_cost: float = DEFAULT_RIPPING_COST
    congestion_cost_multiplier: float = DEFAULT_CONGESTION_COST_MULTIPLIER
    # None disables the guard
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS
    frontier_preview_limit: int = 20
    
    def validate(self) -> List[str]:
        errors = []
        if self.ripping_cost < 0:
            errors.append(f"ripping_cost must be non-negative, got {self.ripping_cost}")
        if self.congestion_cost_multiplier < 0:
            errors.append(
                f"congestion_cost_multiplier must be non-negative, "
                f"got {self.congestion_cost_multiplier}"
            )
        if self.max_iterations is not None and self.max_iterations <= 0:
            errors.append(f"max_iterations must be positive, got {self.max_iterations}")
        if self.frontier_preview_limit < 0:
            errors.append(
                f"frontier_preview_limit must be non-negative, got {self.frontier_preview_limit}"
            )
        return errors


@dataclass
class LoggingSettings:
    """Logging output settings."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/hyperroute.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)
    
    def validate(self) -> List[str]:
        errors = []
        if self.level.upper() not in _LOG_LEVELS:
            errors.append(f"Unknown log level: {self.level}")
        for component, level in self.component_levels.items():
            if level.upper() not in _LOG_LEVELS:
                errors.append(f"Unknown log level for {component}: {level}")
        if self.max_file_size_mb <= 0:
            errors.append("max_file_size_mb must be positive")
        if self.backup_count < 0:
            errors.append("backup_count must be non-negative")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "0.1.0"
    config_version: int = 1
    routing: RoutingSettings = field(default_factory=RoutingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    
    def validate(self) -> Dict[str, List[str]]:
        """Validate all categories, returning error lists keyed by category."""
        return {
            'routing': self.routing.validate(),
            'logging': self.logging.validate(),
        }

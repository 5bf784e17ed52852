"""
Automated maze generation pipeline.

Resolves settings and the random seed, creates the maze, runs the
initialization method and validates the result, optionally writing the maze
as JSON and building its outline.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import InvalidInstructionError, InvalidMethodError, InvalidShapeError, PipelineError
from ..generators.initialize import Method, initialize, parse_method
from ..generators.randomizer import LFSR
from ..layout.maze import Maze
from ..shapes import Shape
from ..validation.core import ValidationError
from .settings import MazeSettings

logger = logging.getLogger(__name__)

MAX_SEED = 2**31 - 1


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PipelineStage(Enum):
    INITIALIZE = "initialize"
    CREATE = "create"
    GENERATE = "generate"
    VALIDATE = "validate"
    WRITE = "write"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class GenerationCancelledException(PipelineError):
    pass


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class PipelineResult:
    success: bool
    maze: Optional[Maze] = None
    outline: Optional[str] = None
    output_file: Optional[str] = None
    stages_completed: List[PipelineStage] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_time(self) -> float:
        return self.metrics.get("total_time", 0.0)

    @property
    def seed(self) -> Optional[int]:
        return self.metrics.get("seed")

    def add_error(self, error: str, stage: Optional[PipelineStage] = None):
        if stage:
            error = f"[{stage.value}] {error}"
        self.errors.append(error)

    def add_warning(self, warning: str, stage: Optional[PipelineStage] = None):
        if stage:
            warning = f"[{stage.value}] {warning}"
        self.warnings.append(warning)


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------

class MazePipeline:
    """Generates a maze from settings."""

    def __init__(self, settings: Optional[MazeSettings] = None):
        self.settings = settings or MazeSettings()
        self.is_running = False
        self.is_cancelled = False
        self.current_stage = PipelineStage.INITIALIZE
        self.progress_callback: Optional[Callable[[PipelineStage, str], None]] = None

        # Resolved settings
        self.shape: Optional[Shape] = None
        self.method: Optional[Method] = None
        self.instructions: Optional[str] = None
        self.dimensions: Tuple[int, int] = (0, 0)
        self.rng: Optional[LFSR] = None

        # Data
        self.maze: Optional[Maze] = None
        self._validate_settings()

    # -- helpers --

    def set_progress_callback(self, callback: Callable[[PipelineStage, str], None]):
        self.progress_callback = callback

    def cancel(self):
        self.is_cancelled = True

    def _check_cancellation(self):
        if self.is_cancelled:
            raise GenerationCancelledException("Pipeline cancelled by user")

    def _enter_stage(self, stage: PipelineStage, message: str):
        self.current_stage = stage
        self._check_cancellation()
        logger.info("Stage: %s", message)
        if self.progress_callback:
            self.progress_callback(stage, message)

    def _validate_settings(self):
        errors = []
        settings = self.settings

        try:
            self.shape = (settings.shape if isinstance(settings.shape, Shape)
                          else Shape.parse(settings.shape))
        except InvalidShapeError as e:
            errors.append(str(e))

        try:
            if isinstance(settings.method, Method):
                self.method, self.instructions = settings.method, None
            else:
                self.method, self.instructions = parse_method(settings.method)
            if settings.instructions is not None:
                from ..generators.spelunker import parse_instructions
                parse_instructions(settings.instructions)
                self.instructions = settings.instructions
        except (InvalidMethodError, InvalidInstructionError) as e:
            errors.append(str(e))

        if (self.method is not None and self.method is not Method.SPELUNKER
                and settings.instructions is not None):
            errors.append(f"Instructions only apply to {Method.SPELUNKER}, not {self.method}")

        if (settings.target_width is None) != (settings.target_height is None):
            errors.append("Target width and target height must be given together")
        elif settings.uses_target_size:
            if settings.target_width <= 0 or settings.target_height <= 0:
                errors.append("Target size must be positive")
        elif settings.width < 1 or settings.height < 1:
            errors.append("Maze dimensions must be at least 1x1")

        if settings.seed is not None and settings.seed < 0:
            errors.append("Seed must not be negative")

        if errors:
            raise PipelineError(f"Invalid settings: {'; '.join(errors)}")

    # -- stages --

    def _initialize(self, seed: int):
        self._enter_stage(PipelineStage.INITIALIZE, "Initialize")
        settings = self.settings
        if settings.uses_target_size:
            self.dimensions = self.shape.minimal_dimensions(
                settings.target_width, settings.target_height)
        else:
            self.dimensions = (settings.width, settings.height)
        self.rng = LFSR(seed)

    def _create(self):
        self._enter_stage(PipelineStage.CREATE, "Create maze")
        width, height = self.dimensions
        self.maze = self.shape.create(width, height)

    def _generate(self):
        self._enter_stage(PipelineStage.GENERATE, f"Initialize with {self.method}")
        initialize(self.maze, self.method, self.rng, self.settings.filter, self.instructions)

    def _validate(self, result: PipelineResult):
        self._enter_stage(PipelineStage.VALIDATE, "Validate maze")
        from ..validation import validate_maze

        validation = validate_maze(self.maze, self.settings.filter)
        for issue in validation.warnings:
            result.add_warning(issue.message, PipelineStage.VALIDATE)
        result.metrics["validation"] = validation.to_dict()
        if validation.failed:
            raise ValidationError(validation)

    def _write(self, result: PipelineResult):
        self._enter_stage(PipelineStage.WRITE, "Write output")
        if self.settings.build_outline:
            from ..conversion.outline import to_path_d
            result.outline = to_path_d(self.maze)
        if self.settings.output_file:
            from ..conversion.maze_storage import save_maze
            result.output_file = str(save_maze(self.maze, Path(self.settings.output_file)))

    # -- main entry --

    def generate(self) -> PipelineResult:
        if self.is_running:
            raise PipelineError("Pipeline is already running")
        self.is_running = True
        self.is_cancelled = False
        result = PipelineResult(success=False)
        start_time = time.time()

        try:
            # Resolve and apply seed for reproducible generation
            if self.settings.seed is not None:
                actual_seed = self.settings.seed
            else:
                actual_seed = random.randint(0, MAX_SEED)

            result.metrics['seed'] = actual_seed
            logger.info("Generation seed: %d", actual_seed)
            if actual_seed == 0:
                # An all zero register never changes
                result.add_warning("Seed 0 makes every random choice the first one")

            stages = [
                lambda: self._initialize(actual_seed),
                self._create,
                self._generate,
            ]
            if self.settings.validate:
                stages.append(lambda: self._validate(result))
            if self.settings.build_outline or self.settings.output_file:
                stages.append(lambda: self._write(result))
            stages.append(lambda: self._enter_stage(PipelineStage.COMPLETE, "Complete"))

            for stage_fn in stages:
                try:
                    stage_fn()
                    result.stages_completed.append(self.current_stage)
                except GenerationCancelledException:
                    result.add_error("Pipeline cancelled by user")
                    return result
                except (PipelineError, ValidationError) as e:
                    result.add_error(str(e), self.current_stage)
                    return result

            width, height = self.dimensions
            logger.info("Generated %s maze %dx%d with %s", self.shape, width, height, self.method)

            result.maze = self.maze
            result.success = True
            result.metrics["width"] = width
            result.metrics["height"] = height
            result.metrics["total_time"] = time.time() - start_time
            logger.info("Pipeline complete in %.2fs", result.metrics["total_time"])
        except Exception as e:
            logger.exception("Unexpected pipeline error")
            result.add_error(f"Unexpected error: {e}")
        finally:
            self.is_running = False
        return result


def generate_maze(settings: Optional[MazeSettings] = None, **kwargs) -> PipelineResult:
    """Run the pipeline once, with settings given as an object or keywords."""
    if settings is None:
        settings = MazeSettings(**kwargs)
    return MazePipeline(settings).generate()

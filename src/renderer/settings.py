# renderer/settings.py
import os
from dataclasses import dataclass
from typing import Optional

SHADOW_EPSILON = 0.01
REFLECTION_EPSILON = 0.001
BLOCKS_PER_WORKER = 4

@dataclass(frozen=True)
class RenderSettings:
    """
    Knobs that are not part of the scene description.

    shadow_epsilon / reflection_epsilon: how far secondary rays start from the
        surface they leave, to keep them from hitting it again.
    workers: size of the process pool; None uses every available CPU, 1
        renders in-process.
    columns_per_task: width of each block of columns handed to a worker; None
        gives every worker BLOCKS_PER_WORKER blocks.
    show_progress: draw a tqdm bar while rendering.
    """
    shadow_epsilon: float = SHADOW_EPSILON
    reflection_epsilon: float = REFLECTION_EPSILON
    workers: Optional[int] = None
    columns_per_task: Optional[int] = None
    show_progress: bool = True

    def __post_init__(self):
        if self.shadow_epsilon < 0 or self.reflection_epsilon < 0:
            raise ValueError("Ray epsilons must be non-negative")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.columns_per_task is not None and self.columns_per_task < 1:
            raise ValueError(f"columns_per_task must be at least 1, got {self.columns_per_task}")

    def resolved_workers(self) -> int:
        return self.workers or os.cpu_count() or 1

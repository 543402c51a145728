"""NameKit - command line driver for NAME MIPS toolchain.

Assembles, links and runs assembly files using toolchain binaries.
"""

from libnamekit.pipeline import PipelineCoordinator, PipelineGoal

__all__ = [
    "PipelineCoordinator",
    "PipelineGoal",
]

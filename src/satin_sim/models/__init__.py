from satin_sim.models.config import ExecutionMode, ExecutionPolicy, RunConfig
from satin_sim.models.laser import CarbonDioxide, GaussianResult, Laser

__all__ = [
    "CarbonDioxide",
    "ExecutionMode",
    "ExecutionPolicy",
    "GaussianResult",
    "Laser",
    "RunConfig",
]

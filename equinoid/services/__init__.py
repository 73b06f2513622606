"""Services module"""

from equinoid.services.lineage_service import (
    KinshipResult,
    LineageRepository,
    LineageService,
    PedigreeNode,
    PedigreeTree,
)
from equinoid.services.simulation_service import (
    BreedingSimulationService,
    SimulationResult,
)

__all__ = [
    "BreedingSimulationService",
    "KinshipResult",
    "LineageRepository",
    "LineageService",
    "PedigreeNode",
    "PedigreeTree",
    "SimulationResult",
]

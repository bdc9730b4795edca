"""Shared models, errors and simulation helpers."""
from common.error_messages import ApiError, ErrorCode, get_error_response
from common.models import GenerationRequest, GenerationResult, GenerationMetadata
from common.simulation import SimulationDelays, get_simulation_delays, simulate_latency

__all__ = [
    "ApiError",
    "ErrorCode",
    "get_error_response",
    "GenerationRequest",
    "GenerationResult",
    "GenerationMetadata",
    "SimulationDelays",
    "get_simulation_delays",
    "simulate_latency",
]

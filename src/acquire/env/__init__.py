from .acquire_env import AcquireEnv
from .specs import EnvSpec, ObservationKey, StepOutput

__all__ = ["AcquireEnv", "EnvSpec", "ObservationKey", "StepOutput"]

"""JMX module - derive and converge JMX remote-monitoring configuration."""

from .build_plan import build_plan
from .Converger import Converger
from .ConvergeResult import ConvergeResult
from .derive_properties import JmxProperties, derive_properties
from .JmxConfig import JmxConfig
from .JmxPlan import Artifact, EnvFragment, JmxPlan
from .JmxSpec import JmxSpec
from .KeyPair import KeyPair

__all__ = [
    "Artifact",
    "ConvergeResult",
    "Converger",
    "EnvFragment",
    "JmxConfig",
    "JmxPlan",
    "JmxProperties",
    "JmxSpec",
    "KeyPair",
    "build_plan",
    "derive_properties",
]

"""
Noise configuration and parameter specification.

This module defines:
- ParameterSpec: Validation and extraction of parameters
- NOISE_PARAMETERS: Ranges and defaults for the six noise parameters
- NoiseConfig: Immutable configuration for a single terrain pass
"""

from dataclasses import dataclass, asdict, replace as dataclass_replace
from typing import Dict, Any, Tuple, List


class ParameterSpec:
    """
    Specification for noise parameters with validation and clamping.
    
    Each parameter has:
    - min_val: Minimum allowed value
    - max_val: Maximum allowed value  
    - default: Default value if not specified
    """
    
    def __init__(self, params: Dict[str, Tuple[float, float, float]]):
        """
        Initialize parameter specification.
        
        Args:
            params: Dict mapping param_name -> (min_val, max_val, default)
        """
        self.params = params
    
    def validate(self, values: Dict[str, float]) -> bool:
        """Check if all required parameters are present and in valid ranges."""
        
        for param_name, (min_val, max_val, _) in self.params.items():
            if param_name not in values:
                return False
            
            value = values[param_name]
            if not (min_val <= value <= max_val):
                return False
        
        return True
    
    def extract_params(self, values: Dict[str, float]) -> Dict[str, float]:
        """Extract parameters, clamping to range and filling in defaults."""
        
        result = {}
        for param_name, (min_val, max_val, default) in self.params.items():
            if param_name in values:
                value = values[param_name]
                value = max(min_val, min(max_val, value))
                result[param_name] = value
            else:
                result[param_name] = default
        
        return result
    
    def defaults(self) -> Dict[str, float]:
        """Get the default value of every parameter."""
        return {name: default for name, (_, _, default) in self.params.items()}
    
    def get_param_names(self) -> List[str]:
        """Get list of parameter names."""
        return list(self.params.keys())
    
    def get_param_ranges(self) -> Dict[str, Tuple[float, float]]:
        """Get parameter ranges (min, max) for each parameter."""
        return {name: (min_val, max_val) for name, (min_val, max_val, _) in self.params.items()}


NOISE_PARAMETERS = ParameterSpec({
    "seed": (0, 2**31 - 1, 1337),
    "amplitude": (0.0, 10.0, 1.0),
    "frequency": (0.0001, 1.0, 0.02),
    "octaves": (1, 16, 4),
    "persistence": (0.0, 2.0, 0.1),
    "lacunarity": (0.0, 16.0, 6.0),
})


@dataclass(frozen=True)
class NoiseConfig:
    """
    Parameters of one terrain pass.

    Instances are never mutated; a parameter change produces a new config
    via ``replace``.
    """

    seed: int = 1337
    amplitude: float = 1.0
    frequency: float = 0.02
    octaves: int = 4
    persistence: float = 0.1
    lacunarity: float = 6.0

    def __post_init__(self):
        if int(self.octaves) != self.octaves or self.octaves < 1:
            raise ValueError(f"octaves must be a positive integer, got {self.octaves}")
        if int(self.seed) != self.seed:
            raise ValueError(f"seed must be an integer, got {self.seed}")
        # Host input fields may hand over floats such as 4.0
        object.__setattr__(self, "octaves", int(self.octaves))
        object.__setattr__(self, "seed", int(self.seed))

    @classmethod
    def from_dict(cls, values: Dict[str, Any], clamp: bool = False) -> "NoiseConfig":
        """
        Build a config from a parameter dictionary.

        Missing parameters take their defaults and unknown keys are ignored.
        With ``clamp`` every value is first limited to its range in
        ``NOISE_PARAMETERS``.
        """
        known = {k: v for k, v in values.items() if k in NOISE_PARAMETERS.params}
        if clamp:
            known = NOISE_PARAMETERS.extract_params(known)
        return cls(**known)

    def replace(self, **changes) -> "NoiseConfig":
        return dataclass_replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

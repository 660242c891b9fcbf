"""
Capability string constants for pysurvlik.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pysurvlik.core.capabilities import CAPABILITY_PER_OBSERVATION

    if scheme.supports(CAPABILITY_PER_OBSERVATION):
        contributions = scheme.log_likelihood_vector(distribution)
"""

# Scheme can return one log-likelihood term per observation
# (log_likelihood_vector), not only the aggregate scalar
CAPABILITY_PER_OBSERVATION = 'per_observation'

# Scheme is built from other schemes and delegates to them
CAPABILITY_COMPOSITE = 'composite'

# Scheme applies per-observation importance weights
CAPABILITY_WEIGHTED = 'weighted'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_PER_OBSERVATION,
    CAPABILITY_COMPOSITE,
    CAPABILITY_WEIGHTED,
})

__all__ = [
    'CAPABILITY_PER_OBSERVATION',
    'CAPABILITY_COMPOSITE',
    'CAPABILITY_WEIGHTED',
    'ALL_CAPABILITIES',
]

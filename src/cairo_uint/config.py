"""Centralized configuration for cairo-uint hints."""


class HintConfig:
    """Centralized configuration for cairo-uint hints."""

    # Limb layout of the uint384 extension structs
    NUM_BITS_SHIFT = 128
    UINT384_N_LIMBS = 3
    UINT768_N_LIMBS = 6

    # Logging configuration
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

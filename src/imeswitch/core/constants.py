# Switching constants shared by the value objects and the settings layer

NOT_A_VARIANT_INDEX = -1  # variant_index of providers without named variants
DEFAULT_SYSTEM_LOCALE = "en_US"  # Fallback when no locale can be resolved
LOCALE_SUBTAG_SEPARATORS = ("_", "-")  # "en_US", "en-US"

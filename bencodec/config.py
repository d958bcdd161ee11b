from pydantic import BaseModel, ConfigDict, Field

# each level of nesting costs two parser frames, stay clear of the default recursion limit
DEFAULT_MAX_DEPTH = 256

# longest integer body, in decimal digits, accepted by decode and produced by encode;
# matches the default int <-> str conversion limit of CPython 3.11+
MAX_INTEGER_DIGITS = 4300


class DecodeOptions(BaseModel):
    """
    options shared by tokenize, parse and decode

    Attributes:
        strict: reject non-canonical input (leading zeros, negative zero, unsorted or
            duplicate dictionary keys, extra top-level values)
        max_depth: maximum number of nested lists/dictionaries
    """
    model_config = ConfigDict(frozen=True)

    strict: bool = False
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

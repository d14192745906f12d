"""
IR Serialization — JSON import/export for IR artifacts.
"""

from camelcaser.ir.schema import TransformResult


def to_json(result: TransformResult, indent: int = 2) -> str:
    """Serialize a TransformResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> TransformResult:
    """
    Deserialize a TransformResult from JSON string.

    Raises:
        ValueError: If the payload was written by an incompatible IR version
    """
    from camelcaser.core.versioning import check_ir_compatibility

    result = TransformResult.model_validate_json(json_str)
    if not check_ir_compatibility(result.version):
        raise ValueError(f"Incompatible IR version: {result.version}")
    return result

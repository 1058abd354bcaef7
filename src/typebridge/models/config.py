"""Bridge configuration model."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from typebridge.ir.types import TRDPType
from typebridge.models.common import HexInt, TRDPTypeName


class BridgeConfig(BaseModel):
    """Tunable limits and naming rules of the SCADE to TRDP bridge.

    All fields have defaults matching KCG mapping files and the TRDP
    data-set description format, so an empty configuration is valid.

    Example:
    -------
        ```yaml
        max_model_id: 0x4000
        dataset_name_length: 30
        size_type_maps_to: UINT32
        numeric_type_ids: true
        ```

    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        frozen=True,
    )

    max_model_id: Annotated[
        HexInt,
        Field(
            default=0x4000,
            ge=2,
            description="Exclusive upper bound of model identifiers",
        ),
    ]
    max_array_size: Annotated[
        HexInt,
        Field(default=0xFFFF, ge=1, description="Largest accepted array element count"),
    ]
    dataset_name_length: Annotated[
        int,
        Field(default=30, ge=1, description="Maximum length of a data-set name"),
    ]
    dataset_id_length: Annotated[
        int,
        Field(default=11, ge=1, description="Maximum length of a data-set/type id string"),
    ]
    dataset_code_offset: Annotated[
        int,
        Field(default=1000, ge=0, description="Data-set code = offset + model id"),
    ]
    name_separator: Annotated[
        str,
        Field(default="_", max_length=4, description="Joins package path and type names"),
    ]
    scope_separator: Annotated[
        str,
        Field(default="::", min_length=1, description="Separates operator path segments"),
    ]
    size_type_maps_to: Annotated[
        TRDPTypeName,
        Field(default=TRDPType.INT32, description="TRDP type for the KCG 'size' type"),
    ]
    numeric_type_ids: Annotated[
        bool,
        Field(default=False, description="Emit primitive types as codes ('6') not names"),
    ]
    root_option: Annotated[
        str,
        Field(default="root", min_length=1, description="Config option naming the root operator"),
    ]

    def dataset_code(self, model_id: int) -> int:
        """Return the synthesized data-set code of a user type."""
        return self.dataset_code_offset + model_id

    def primitive_id(self, trdp_type: TRDPType) -> str:
        """Return the data-set id string of a primitive type."""
        text = str(trdp_type.value) if self.numeric_type_ids else trdp_type.name
        return text[: self.dataset_id_length]

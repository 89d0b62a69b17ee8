from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class SkuRecordSchema(BaseModel):
    code: str = Field(min_length=1, description="Unique SKU code")
    brand_line: str = Field(description="Brand / product line")
    flavor: str = Field(description="Flavor or variant")
    units_per_box: Optional[str] = Field(default=None, description="Units per box")
    shelf_life: Optional[str] = Field(default=None, description="Shelf life")

    @field_validator('code')
    def strip_code(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('code must not be blank')
        return v

    @field_validator('units_per_box', 'shelf_life', mode='before')
    def number_to_string(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if v == '':
            return None
        return v


class OcrMatchRequest(BaseModel):
    text: str = Field(description="OCR text extracted from the package photo")
    image_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('image_id', 'imageId'),
        description="Client-side image identifier, echoed into the audit trail",
    )


class AuditConfirmationRequest(BaseModel):
    confirmed_code: str = Field(
        min_length=1,
        validation_alias=AliasChoices('confirmed_code', 'confirmedCode'),
        description="SKU code the operator confirmed",
    )
    image_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('image_id', 'imageId'),
    )

    @field_validator('confirmed_code')
    def strip_confirmed_code(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('confirmed_code must not be blank')
        return v


class AuditListRequest(BaseModel):
    limit: int = Field(default=100, ge=1, le=500, description="Maximum entries to return")

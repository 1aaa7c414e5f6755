from pydantic import AliasChoices, BaseModel, Field


class TranslateRequest(BaseModel):
    # Record-style field names are accepted for the same three inputs.
    text: str = Field(..., validation_alias=AliasChoices("text", "originalText"))
    from_language: str = Field(..., validation_alias=AliasChoices("from", "fromLanguage"))
    to_language: str = Field(..., validation_alias=AliasChoices("to", "toLanguage"))


class TranslationResponse(BaseModel):
    id: int
    original_text: str = Field(..., serialization_alias="originalText")
    translated_text: str = Field(..., serialization_alias="translatedText")
    from_language: str = Field(..., serialization_alias="fromLanguage")
    to_language: str = Field(..., serialization_alias="toLanguage")

    model_config = {"from_attributes": True}

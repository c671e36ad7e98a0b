"""
Medical document schema - the INPUT CONTRACT for the retrieval engine.

Each record in the dataset describes one condition. The engine never
mutates a document; vectors are derived from it and stored separately.

WHY PYDANTIC:
-------------
The dataset is hand-edited JSON. Validating it once at load time means
the vector space builder can assume every field has the right shape.
"""

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    A single condition in the medical knowledge base.

    The dataset spells the name field "disease_name"; in code it is
    just "name". Either spelling is accepted on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(
        alias="disease_name",
        description="Condition name (e.g., 'Influenza')",
    )

    symptoms: list[str] = Field(
        default_factory=list,
        description="Ordered list of symptoms",
    )

    causes: list[str] = Field(
        default_factory=list,
        description="Ordered list of causes",
    )

    diagnosis: str = Field(
        default="",
        description="How the condition is diagnosed",
    )

    treatment: list[str] = Field(
        default_factory=list,
        description="Ordered list of treatments",
    )

    def searchable_text(self) -> str:
        """Concatenate every field into the text blob that gets indexed."""
        return " ".join([
            self.name,
            " ".join(self.symptoms),
            " ".join(self.causes),
            self.diagnosis,
            " ".join(self.treatment),
        ])

    def to_dict(self) -> dict:
        """Convert to the dataset's JSON shape."""
        return self.model_dump(by_alias=True)

"""Feature-field layouts of the supported dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .models import DictionarySchema

MISSING_FIELD = "*"


@dataclass(frozen=True, slots=True)
class FeatureSchema:
    """Fixed indexes into a MeCab feature array.

    All accessors return ``None`` for fields that are absent, empty or the
    ``*`` placeholder instead of raising.
    """

    schema: DictionarySchema
    pos_index: int
    lemma_index: int
    reading_index: int
    current_reading_index: Optional[int] = None

    def field(self, features: Sequence[str], index: Optional[int]) -> Optional[str]:
        if index is None or index < 0 or index >= len(features):
            return None
        value = features[index]
        if value is None:
            return None
        text = str(value).strip()
        if not text or text == MISSING_FIELD:
            return None
        return text

    def pos_label(self, features: Sequence[str]) -> Optional[str]:
        return self.field(features, self.pos_index)

    def lemma(self, features: Sequence[str]) -> Optional[str]:
        return self.field(features, self.lemma_index)

    def reading(self, features: Sequence[str]) -> Optional[str]:
        return self.field(features, self.reading_index)

    def current_reading(self, features: Sequence[str]) -> Optional[str]:
        """Pronunciation of the inflected surface form, extended layout only."""

        return self.field(features, self.current_reading_index)


# 品詞,細分類1,細分類2,細分類3,活用型,活用形,原形,読み,発音
STANDARD_SCHEMA = FeatureSchema(
    schema=DictionarySchema.STANDARD,
    pos_index=0,
    lemma_index=6,
    reading_index=7,
)

# pos1,pos2,pos3,pos4,cType,cForm,lForm,lemma,orth,pron,...
EXTENDED_SCHEMA = FeatureSchema(
    schema=DictionarySchema.EXTENDED,
    pos_index=0,
    lemma_index=7,
    reading_index=6,
    current_reading_index=9,
)

_SCHEMAS = {
    DictionarySchema.STANDARD: STANDARD_SCHEMA,
    DictionarySchema.EXTENDED: EXTENDED_SCHEMA,
}


def schema_for(schema: DictionarySchema) -> FeatureSchema:
    return _SCHEMAS[DictionarySchema(schema)]


__all__ = ["EXTENDED_SCHEMA", "FeatureSchema", "MISSING_FIELD", "STANDARD_SCHEMA", "schema_for"]

from psycopg.rows import dict_row

from textinsight.analyzers.models import AnalysisType, ModelRef
from textinsight.database.connection import get_connection
from textinsight.database.repositories.base import BaseModelRepository


class ModelsRepository(BaseModelRepository):
    """Read-only lookups against the models table."""

    # Complete runs are configured by models of type 'combined'.
    _TYPE_COLUMN_VALUES = {AnalysisType.COMPLETE: "combined"}

    def find_default_for_language(
        self,
        analysis_type: AnalysisType,
        language: str,
    ) -> ModelRef | None:
        type_value = self._TYPE_COLUMN_VALUES.get(analysis_type, analysis_type.value)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, name, version, languages, parameters
                    FROM models
                    WHERE type = %s
                      AND %s = ANY(languages)
                      AND is_active
                    ORDER BY accuracy DESC NULLS LAST, created_at DESC
                    LIMIT 1
                    """,
                    (type_value, language),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return ModelRef(
            id=str(row["id"]),
            name=row["name"],
            analysis_type=analysis_type,
            languages=tuple(row["languages"]),
            version=row["version"],
            parameters=dict(row["parameters"] or {}),
        )

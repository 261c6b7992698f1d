from datetime import datetime, timezone

from app.db.database import Database, register_schema_sql
from app.models.assistant.models import Assistant


@register_schema_sql
def _create_assistants_table() -> str:
    return """
        CREATE TABLE IF NOT EXISTS assistants (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            instructions TEXT NOT NULL,
            persona TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """


ASSISTANT_COLUMNS = "id, name, instructions, persona, created_at, updated_at"


class AssistantRepo:
    """Repository for assistant data access"""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_assistant(
        self,
        assistant_id: str,
        name: str,
        instructions: str,
        persona: str,
        created_at: datetime,
    ) -> Assistant:
        """Create a new assistant"""
        self.db.execute_update(
            """
            INSERT INTO assistants
            (id, name, instructions, persona, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                assistant_id,
                name,
                instructions,
                persona,
                created_at.isoformat(),
                created_at.isoformat(),
            ),
        )

        return Assistant(
            id=assistant_id,
            name=name,
            instructions=instructions,
            persona=persona,
            created_at=created_at,
            updated_at=created_at,
        )

    def get_assistant_by_id(self, assistant_id: str) -> Assistant | None:
        rows = self.db.execute_query(
            f"SELECT {ASSISTANT_COLUMNS} FROM assistants WHERE id = ?",
            (assistant_id,),
        )

        if not rows:
            return None

        return self._row_to_assistant(rows[0])

    def list_assistants(self) -> list[Assistant]:
        """List all assistants, newest first"""
        rows = self.db.execute_query(
            f"SELECT {ASSISTANT_COLUMNS} FROM assistants ORDER BY created_at DESC, rowid DESC"
        )

        return [self._row_to_assistant(row) for row in rows]

    def update_assistant(
        self,
        assistant_id: str,
        name: str | None = None,
        instructions: str | None = None,
        persona: str | None = None,
    ) -> Assistant | None:
        """Update the provided fields of an assistant; updated_at is always refreshed"""
        updates = []
        params = []

        if name is not None:
            updates.append("name = ?")
            params.append(name)

        if instructions is not None:
            updates.append("instructions = ?")
            params.append(instructions)

        if persona is not None:
            updates.append("persona = ?")
            params.append(persona)

        updates.append("updated_at = ?")
        params.append(datetime.now(timezone.utc).isoformat())

        params.append(assistant_id)

        affected = self.db.execute_update(
            f"UPDATE assistants SET {', '.join(updates)} WHERE id = ?",
            tuple(params),
        )
        if affected == 0:
            return None

        return self.get_assistant_by_id(assistant_id)

    def delete_assistant(self, assistant_id: str) -> bool:
        """Delete an assistant together with its chats; returns False if it did not exist"""
        affected = self.db.execute_update(
            "DELETE FROM assistants WHERE id = ?",
            (assistant_id,),
        )
        return affected > 0

    def _row_to_assistant(self, row: dict) -> Assistant:
        """Convert a database row to an Assistant object"""
        return Assistant(
            id=row["id"],
            name=row["name"],
            instructions=row["instructions"],
            persona=row["persona"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

from datetime import datetime, timezone

from app.db.database import Database, register_schema_sql
from app.models.assistant.models import Assistant
from app.models.chat.enums import MessageRole
from app.models.chat.models import Chat, ChatMessage
from utils import not_none


@register_schema_sql
def _create_chats_table() -> str:
    return """
        CREATE TABLE IF NOT EXISTS chats (
            id TEXT PRIMARY KEY,
            assistant_id TEXT NOT NULL,
            title TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            FOREIGN KEY (assistant_id) REFERENCES assistants(id) ON DELETE CASCADE
        )
    """


@register_schema_sql
def _create_chats_assistant_index() -> str:
    return """
        CREATE INDEX IF NOT EXISTS idx_chats_assistant_id
        ON chats(assistant_id)
    """


@register_schema_sql
def _create_messages_table() -> str:
    return """
        CREATE TABLE IF NOT EXISTS messages (
            id TEXT PRIMARY KEY,
            chat_id TEXT NOT NULL,
            role TEXT NOT NULL,
            content TEXT NOT NULL,
            created_at TEXT NOT NULL,
            FOREIGN KEY (chat_id) REFERENCES chats(id) ON DELETE CASCADE
        )
    """


@register_schema_sql
def _create_messages_chat_index() -> str:
    return """
        CREATE INDEX IF NOT EXISTS idx_messages_chat_id
        ON messages(chat_id)
    """


CHAT_SELECT = """
    SELECT
        chats.id, chats.assistant_id, chats.title, chats.created_at, chats.updated_at,
        assistants.name AS assistant_name,
        assistants.instructions AS assistant_instructions,
        assistants.persona AS assistant_persona,
        assistants.created_at AS assistant_created_at,
        assistants.updated_at AS assistant_updated_at
    FROM chats
    JOIN assistants ON assistants.id = chats.assistant_id
"""


class ChatRepo:
    """Repository for chat and message data access"""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_chat(
        self,
        chat_id: str,
        assistant_id: str,
        title: str,
        created_at: datetime,
    ) -> Chat:
        """Create a new chat bound to an existing assistant"""
        self.db.execute_update(
            """
            INSERT INTO chats (id, assistant_id, title, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                chat_id,
                assistant_id,
                title,
                created_at.isoformat(),
                created_at.isoformat(),
            ),
        )

        return not_none(self.get_chat_by_id(chat_id), f"Chat {chat_id}")

    def get_chat_by_id(self, chat_id: str) -> Chat | None:
        rows = self.db.execute_query(
            f"{CHAT_SELECT} WHERE chats.id = ?",
            (chat_id,),
        )

        if not rows:
            return None

        return self._row_to_chat(rows[0])

    def list_chats(self, assistant_id: str | None = None) -> list[Chat]:
        """List chats, most recently updated first"""
        if assistant_id is None:
            rows = self.db.execute_query(
                f"{CHAT_SELECT} ORDER BY chats.updated_at DESC, chats.rowid DESC"
            )
        else:
            rows = self.db.execute_query(
                f"{CHAT_SELECT} WHERE chats.assistant_id = ? ORDER BY chats.updated_at DESC, chats.rowid DESC",
                (assistant_id,),
            )

        return [self._row_to_chat(row) for row in rows]

    def update_chat(self, chat_id: str, title: str | None = None) -> Chat | None:
        """Update a chat's title; updated_at is always refreshed"""
        updates = ["updated_at = ?"]
        params: list[str] = [datetime.now(timezone.utc).isoformat()]

        if title is not None:
            updates.append("title = ?")
            params.append(title)

        params.append(chat_id)

        affected = self.db.execute_update(
            f"UPDATE chats SET {', '.join(updates)} WHERE id = ?",
            tuple(params),
        )
        if affected == 0:
            return None

        return self.get_chat_by_id(chat_id)

    def delete_chat(self, chat_id: str) -> bool:
        """Delete a chat together with its messages; returns False if it did not exist"""
        affected = self.db.execute_update(
            "DELETE FROM chats WHERE id = ?",
            (chat_id,),
        )
        return affected > 0

    def add_message(
        self,
        message_id: str,
        chat_id: str,
        role: MessageRole,
        content: str,
        created_at: datetime,
    ) -> ChatMessage:
        """Add a message to a chat and bump the chat's updated_at"""
        self.db.execute_transaction([
            (
                """
                INSERT INTO messages (id, chat_id, role, content, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (message_id, chat_id, role.value, content, created_at.isoformat()),
            ),
            (
                "UPDATE chats SET updated_at = ? WHERE id = ?",
                (created_at.isoformat(), chat_id),
            ),
        ])

        return ChatMessage(
            id=message_id,
            chat_id=chat_id,
            role=role,
            content=content,
            created_at=created_at,
        )

    def get_messages(self, chat_id: str) -> list[ChatMessage]:
        """Get all messages of a chat in conversation order"""
        rows = self.db.execute_query(
            """
            SELECT id, chat_id, role, content, created_at
            FROM messages
            WHERE chat_id = ?
            ORDER BY created_at ASC, rowid ASC
            """,
            (chat_id,),
        )

        return [
            ChatMessage(
                id=row["id"],
                chat_id=row["chat_id"],
                role=MessageRole(row["role"]),
                content=row["content"],
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in rows
        ]

    def _row_to_chat(self, row: dict) -> Chat:
        """Convert a joined chat/assistant row to a Chat object"""
        return Chat(
            id=row["id"],
            assistant_id=row["assistant_id"],
            title=row["title"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            assistant=Assistant(
                id=row["assistant_id"],
                name=row["assistant_name"],
                instructions=row["assistant_instructions"],
                persona=row["assistant_persona"],
                created_at=datetime.fromisoformat(row["assistant_created_at"]),
                updated_at=datetime.fromisoformat(row["assistant_updated_at"]),
            ),
        )

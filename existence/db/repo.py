# existence/db/repo.py
from __future__ import annotations

import time
from typing import Any

from existence.db.session import db_execute, db_fetch_one


class StandingMessagesRepo:
    """
    Table: standing_messages

      - channel_id (bigint)
      - key (text)            fingerprint of the standing message, e.g. "Existence Downloads"
      - message_id (bigint)   last known Discord message id
      - updated_ts (int)
    + primary key (channel_id, key)
    """

    @staticmethod
    async def get(channel_id: int, key: str) -> dict[str, Any] | None:
        q = """
        SELECT channel_id, key, message_id, COALESCE(updated_ts, 0) AS updated_ts
        FROM standing_messages
        WHERE channel_id = :cid AND key = :key
        LIMIT 1
        """
        return await db_fetch_one(q, {"cid": int(channel_id), "key": key})

    @staticmethod
    async def save(channel_id: int, key: str, message_id: int) -> None:
        q = """
        INSERT INTO standing_messages (channel_id, key, message_id, updated_ts)
        VALUES (:cid, :key, :mid, :now)
        ON CONFLICT (channel_id, key)
        DO UPDATE SET message_id = :mid, updated_ts = :now
        """
        await db_execute(
            q,
            {"cid": int(channel_id), "key": key, "mid": int(message_id), "now": int(time.time())},
        )

    @staticmethod
    async def forget(channel_id: int, key: str) -> bool:
        q = "DELETE FROM standing_messages WHERE channel_id = :cid AND key = :key"
        return await db_execute(q, {"cid": int(channel_id), "key": key}) > 0

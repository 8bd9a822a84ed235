from __future__ import annotations

import logging

from existence.db.session import db_execute

log = logging.getLogger(__name__)

DDL: list[str] = [
    # =========================================================
    # standing messages: (channel, fingerprint) -> message id
    # =========================================================
    """
    CREATE TABLE IF NOT EXISTS standing_messages (
        channel_id BIGINT NOT NULL,
        key TEXT NOT NULL,
        message_id BIGINT NOT NULL,
        updated_ts INTEGER NOT NULL DEFAULT 0,
        PRIMARY KEY (channel_id, key)
    );
    """,
]


async def run_migrations() -> None:
    # one statement per execute
    for q in DDL:
        qq = (q or "").strip()
        if not qq:
            continue
        try:
            await db_execute(qq, {})
        except Exception as e:
            log.exception("Migration failed for query: %s | err=%s", qq[:120], e)
            raise

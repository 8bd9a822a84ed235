from __future__ import annotations

import uvicorn

from existence.config import settings


def main() -> None:
    uvicorn.run("existence.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()

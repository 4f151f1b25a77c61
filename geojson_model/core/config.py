from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CodecConfig(BaseModel):
    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_CONFIG = CodecConfig()


def load_config(path: Path) -> CodecConfig:
    with Path(path).open("r", encoding="utf-8") as file:
        return CodecConfig.model_validate_json(file.read())

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

DEFAULT_API_URL = "https://api-inference.huggingface.co/models/gpt2"
API_KEY_ENV = "TASKMATE_API_KEY"


@dataclass(frozen=True)
class Paths:
    base_dir: Path

    @property
    def config_path(self) -> Path:
        return self.base_dir / "config.json"


@dataclass(frozen=True)
class CompletionSettings:
    api_url: str = DEFAULT_API_URL
    api_key: str | None = None
    max_length: int = 100
    temperature: float = 0.7

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


def load_paths(base_dir: Path | None = None) -> Paths:
    resolved = base_dir or (Path.home() / ".taskmate")
    return Paths(base_dir=resolved)


def load_settings(path: Path, environ: Mapping[str, str] | None = None) -> CompletionSettings:
    env = os.environ if environ is None else environ
    settings = CompletionSettings()
    if path.exists():
        payload = json.loads(path.read_text())
        completion = payload.get("completion", {})
        settings = CompletionSettings(
            api_url=str(completion.get("api_url") or DEFAULT_API_URL),
            api_key=completion.get("api_key") or None,
            max_length=int(completion.get("max_length", 100)),
            temperature=float(completion.get("temperature", 0.7)),
        )
    env_key = env.get(API_KEY_ENV)
    if env_key:
        settings = replace(settings, api_key=env_key)
    return settings


def save_settings(path: Path, settings: CompletionSettings) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "completion": {
            "api_url": settings.api_url,
            "api_key": settings.api_key,
            "max_length": settings.max_length,
            "temperature": settings.temperature,
        },
    }
    path.write_text(json.dumps(payload, indent=2))

"""
どこで: `util.config`。
何を: YAML 構成（`configs/default.yaml` + ルート `config.yaml` + 環境変数 `MONET_CONFIG`）を読み込む。
なぜ: フォールバック色やシェードのクロマ上限などをコード外から差し替えられるようにするため。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MONET_CONFIG"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to load config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - 上位に `pyproject.toml` か `configs/` があるもっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (parent / "pyproject.toml").exists() or (parent / "configs").exists():
            return parent
    # 典型: <repo>/src/util/config.py -> <repo>
    return cur.parent.parent


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順（後勝ち）:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`
    3) 環境変数 `MONET_CONFIG` が指すファイル

    - いずれも存在しない/不正な場合は空辞書を返す。
    - トップレベルのみ上書き（ディープマージはしない）。
    """
    root = project_root if project_root is not None else find_project_root(Path(__file__).parent)
    candidates = [root / "configs" / "default.yaml", root / "config.yaml"]
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))

    merged: Dict[str, Any] = {}
    for path in candidates:
        if path.exists():
            merged.update(_safe_load_yaml(path))
    return merged


__all__ = ["CONFIG_ENV_VAR", "find_project_root", "load_config"]

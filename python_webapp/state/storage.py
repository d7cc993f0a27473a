"""
환경설정 저장소

get/set 키-값 인터페이스만 제공. 값은 문자열(JSON)로 저장.
  - MemoryStorage: 테스트/임시용
  - JsonFileStorage: 세션 간 유지 (JSON 파일 1개)
  - SessionStateStorage: Streamlit session_state (브라우저 세션 동안만)
"""
import json
import logging
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Union

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """저장소 읽기/쓰기 실패"""


class KeyValueStorage:
    """저장소 기본 인터페이스"""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStorage(KeyValueStorage):
    """JSON 객체 하나를 파일에 저장 ({key: value})"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self.path}")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"Stored {key} in {self.path}")


class SessionStateStorage(KeyValueStorage):
    """Streamlit st.session_state (또는 임의의 dict) 래퍼"""

    PREFIX = 'storage:'

    def __init__(self, session_state: MutableMapping):
        self.session_state = session_state

    def get(self, key: str) -> Optional[str]:
        return self.session_state.get(self.PREFIX + key)

    def set(self, key: str, value: str) -> None:
        self.session_state[self.PREFIX + key] = value

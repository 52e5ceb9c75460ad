from typing import Dict, Any
from pydantic import BaseModel, ConfigDict

# ==================== 核心基类 ====================

def _deep_merge(base: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in data.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class BaseSettings(BaseModel):
    """
    所有配置类的基类，提供原地更新（update）与赋值校验。

    Methods:
        update(data: Dict[str, Any]) -> None:
            原地递归更新模型属性。先对合并后的完整配置做一次校验，任何字段不合法时
            抛出 ValidationError 且不改动任何字段；校验通过后嵌套的 BaseSettings
            子模型递归更新，对象引用不变。
    """

    model_config = ConfigDict(
        validate_assignment=True,  # 运行时修改属性也会触发校验
        extra='ignore',           # 忽略多余的字段，旧版配置文件不会导致崩溃
    )

    def update(self, data: Dict[str, Any]):
        """
        原地更新
        递归更新嵌套的 Pydantic 模型，确保对象引用不变。
        """
        if not isinstance(data, dict):
            return

        type(self).model_validate(_deep_merge(self.model_dump(), data))
        self._apply(data)

    def _apply(self, data: Dict[str, Any]):
        for key, value in data.items():
            if key not in type(self).model_fields:
                continue

            current_val = getattr(self, key)

            if isinstance(current_val, BaseSettings) and isinstance(value, dict):
                current_val._apply(value)
            else:
                setattr(self, key, value)

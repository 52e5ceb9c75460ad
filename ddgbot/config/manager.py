import os, json
from pydantic import ValidationError
from ddgbot.common.info_module import LOGMANAGER

class ConfigManager:
    """
    服务于全局单例对象。
    """

    @staticmethod
    def load_settings(singleton_obj, filename: str = 'config.json'):
        """
        读取配置文件，并将数据原地注入到传入的单例对象中。
        确保内存地址不变，全局引用不断连。

        :param singleton_obj: 全局的 APP_SETTINGS 实例
        :param filename: 配置文件路径
        :return: 是否成功读取
        """
        if not os.path.exists(filename):
            LOGMANAGER.warning(f"Config file '{filename}' not found. Using default internal values.")
            return False

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError:
            LOGMANAGER.error(f"JSON format error in '{filename}'. Settings not updated.")
            return False

        try:
            singleton_obj.update(data)
        except ValidationError as e:
            LOGMANAGER.error(f"Invalid value in '{filename}'. Settings not updated: {e}")
            return False
        LOGMANAGER.info(f"Global configuration updated from '{filename}'.")
        return True

    @staticmethod
    def save_settings(singleton_obj, filename: str = 'config.json'):
        """
        保存单例对象的状态到文件。
        """
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, 'w', encoding='utf-8') as f:
            json_data = singleton_obj.model_dump(mode='json', exclude_none=False)
            json.dump(json_data, f, ensure_ascii=False, indent=4)
        LOGMANAGER.success(f"Configuration saved to '{filename}'.")


def apply_log_settings(log_settings) -> None:
    """把 LogSettings 推到全局 LOGMANAGER"""
    LOGMANAGER.setOptions(
        level=log_settings.level,
        enable_console=log_settings.enable_console,
        file_path=log_settings.file_path,
    )

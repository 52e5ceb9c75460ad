from .info_module import LOGMANAGER, LogManager

__all__ = ['LOGMANAGER', 'LogManager']

from .logger import ModuleLogger, find_logs_dir

__all__ = ['ModuleLogger', 'find_logs_dir']

import logging


class LevelLogFilter(logging.Filter):
    levels: tuple[str, ...] = ()
    
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelname in self.levels


class InfoWarningLogFilter(LevelLogFilter):
    levels = ('WARNING', 'INFO')


class ErrorCriticalLogFilter(LevelLogFilter):
    levels = ('ERROR', 'CRITICAL')


class DebugLogFilter(LevelLogFilter):
    levels = ('DEBUG',)


class MatchTraceLogFilter(logging.Filter):
    """Пропускает только трассировку сработавших шаблонов (extra={'trace': True})."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, 'trace', False)

from src.config.settings import Settings, settings
from src.sheets.base import SpreadsheetAppender
from src.sheets.google_sheets import GoogleSheetsAppender


def get_spreadsheet_appender(config: Settings = settings) -> SpreadsheetAppender:
    return GoogleSheetsAppender(config=config)


__all__ = [
    "GoogleSheetsAppender",
    "SpreadsheetAppender",
    "get_spreadsheet_appender",
]

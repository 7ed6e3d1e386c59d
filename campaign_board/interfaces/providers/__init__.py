from campaign_board.interfaces.providers.data_storage import DataStorageProvider

__all__ = ["DataStorageProvider"]

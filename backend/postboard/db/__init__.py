"""Database Package: declarative Base shared by models and the storage handle."""

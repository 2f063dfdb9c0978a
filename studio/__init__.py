"""Aurora Studio — site vitrine du collectif + admin (CMS, éditeur de blocs)."""
__version__ = "1.0.0"

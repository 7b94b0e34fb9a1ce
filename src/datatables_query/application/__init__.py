"""Application layer – DataTables request translation and orchestration."""

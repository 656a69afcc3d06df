"""Service layer — file-backed operations returning ServiceResult."""

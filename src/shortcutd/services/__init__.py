"""Service layer — orchestrates the domain and reports through ServiceResult."""

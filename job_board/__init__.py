"""Job Board API: CRUD over job postings."""

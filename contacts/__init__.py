"""
Contacts backend package.

A FastAPI application exposing contact records stored in a key-addressed
document collection (Firestore, SQL, Redis or in-memory).
"""

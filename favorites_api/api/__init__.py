"""HTTP routers exposing the catalog and favorites endpoints."""

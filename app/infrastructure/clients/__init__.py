"""Vendor API clients used at the directory-client boundary.

- google_workspace: Google Workspace Admin SDK Directory API
- microsoft_graph: Microsoft Graph directory endpoints

Each client returns OperationResult and owns retry/backoff for its vendor.
"""

"""
Pieces shared by the catalog and task services: engine creation,
logging setup, the generic repository and the error handlers.
"""

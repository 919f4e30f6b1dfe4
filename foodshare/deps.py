from fastapi import Request

# Process-scoped collaborators are built in main.lifespan and parked on app.state.

def get_session_manager(request: Request):
    return request.app.state.session_manager

def get_engine(request: Request):
    return request.app.state.engine

def get_ledger(request: Request):
    return request.app.state.engine.ledger

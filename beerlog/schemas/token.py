from pydantic import BaseModel


class DevToken(BaseModel):
    token: str
    cognito_sub: str
    expires_at: int

import os


def _split_names(raw):
    return frozenset(name.strip().lower() for name in raw.split(",") if name.strip())


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///funfire.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    STORAGE_NAMESPACE = os.getenv('STORAGE_NAMESPACE', 'funfire')
    ADMIN_USERNAMES = _split_names(os.getenv('ADMIN_USERNAMES', 'admin,owner,headadmin'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

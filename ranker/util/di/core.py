"""Settings providers."""

from dishka import Scope, provide

from ranker.config import DatabaseSettings, MailSettings, Settings
from ranker.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Loads ``Settings`` once and hands out its sections."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def mail_settings(self, settings: Settings) -> MailSettings:
        return settings.mail

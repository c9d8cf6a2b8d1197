# pylint: disable=c-extension-no-member, too-few-public-methods
from dependency_injector import containers, providers

from vitesse.dependency_injection.services import Services


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    services = providers.Container(Services, config=config)

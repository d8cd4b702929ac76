"""
Dependency Injection Configuration.

This module wires together all the concrete implementations
following Clean Architecture principles.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.cache.redis_cache import RedisCacheService
from src.infrastructure.analytics.http_analytics_client import HttpAnalyticsClient
from src.infrastructure.llm.anthropic_client import AnthropicLLMClient
from src.infrastructure.llm.prompts import BOOKING_ASSISTANT_PROMPT
from src.infrastructure.mcp.client.mcp_client import RemoteMCPClient
from src.infrastructure.repositories.redis_chat_repository import RedisChatRepository
from src.infrastructure.repositories.redis_booking_repository import (
    RedisBookingRepository,
)

from src.application.interfaces.i_cache_service import ICacheService
from src.application.interfaces.i_analytics_client import IAnalyticsClient
from src.application.interfaces.i_llm_client import ILLMClient, MCPServerSpec
from src.application.interfaces.i_mcp_client import IMCPClient
from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.repositories.i_booking_repository import IBookingRepository
from src.domain.value_objects.chat_mode import ChatMode
from src.domain.value_objects.client_id import ClientId
from src.domain.exceptions.domain_exceptions import InvalidClientIdError

from src.application.use_cases.proxy_chat import ProxyChatUseCase, ModeConfig
from src.application.use_cases.send_message import SendMessageUseCase
from src.application.use_cases.list_chats import ListChatsUseCase
from src.application.use_cases.get_chat import GetChatUseCase
from src.application.use_cases.delete_chat import DeleteChatUseCase
from src.application.use_cases.hotel_chat import HotelChatUseCase
from src.application.use_cases.record_booking import RecordBookingUseCase
from src.application.use_cases.get_booking import GetBookingUseCase
from src.application.use_cases.get_dashboard import GetDashboardUseCase


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Client identity
def get_client_id(x_client_id: Annotated[str, Header()]) -> ClientId:
    """Read the browser's client id from the X-Client-Id header."""
    try:
        return ClientId(x_client_id)
    except InvalidClientIdError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


ClientIdDep = Annotated[ClientId, Depends(get_client_id)]


# Shared clients
@dataclass
class SharedClients:
    """Connection-holding clients built once per app and closed on shutdown."""

    llm_client: AnthropicLLMClient
    cache_service: RedisCacheService
    chat_repository: RedisChatRepository
    booking_repository: RedisBookingRepository

    @classmethod
    def from_settings(cls, settings: Settings) -> "SharedClients":
        return cls(
            llm_client=AnthropicLLMClient(
                api_key=settings.anthropic_api_key,
                anthropic_version=settings.anthropic_version,
                betas=[settings.anthropic_mcp_beta],
            ),
            cache_service=RedisCacheService(
                redis_url=settings.redis_url,
                default_ttl=settings.analytics_cache_ttl_seconds,
            ),
            chat_repository=RedisChatRepository(
                redis_url=settings.redis_url,
                key_prefix=settings.chat_storage_prefix,
            ),
            booking_repository=RedisBookingRepository(redis_url=settings.redis_url),
        )

    async def aclose(self) -> None:
        await self.llm_client.close()
        await self.cache_service.close()
        await self.chat_repository.close()
        await self.booking_repository.close()


def get_shared_clients(request: Request) -> SharedClients:
    return request.app.state.clients


SharedClientsDep = Annotated[SharedClients, Depends(get_shared_clients)]


# Cache Service
def get_cache_service(clients: SharedClientsDep) -> ICacheService:
    return clients.cache_service


CacheServiceDep = Annotated[ICacheService, Depends(get_cache_service)]


# LLM Client
def get_llm_client(clients: SharedClientsDep) -> ILLMClient:
    return clients.llm_client


LLMClientDep = Annotated[ILLMClient, Depends(get_llm_client)]


# Analytics Client
def get_analytics_client(settings: SettingsDep) -> IAnalyticsClient:
    return HttpAnalyticsClient(
        base_url=settings.analytics_base_url,
        timeout=settings.analytics_timeout_seconds,
    )


AnalyticsClientDep = Annotated[IAnalyticsClient, Depends(get_analytics_client)]


# MCP Client
def get_mcp_client(settings: SettingsDep) -> IMCPClient:
    return RemoteMCPClient(url=settings.mcp_url, name=settings.mcp_server_name)


MCPClientDep = Annotated[IMCPClient, Depends(get_mcp_client)]


# Repositories
def get_chat_repository(clients: SharedClientsDep) -> IChatRepository:
    return clients.chat_repository


ChatRepositoryDep = Annotated[IChatRepository, Depends(get_chat_repository)]


def get_booking_repository(clients: SharedClientsDep) -> IBookingRepository:
    return clients.booking_repository


BookingRepositoryDep = Annotated[IBookingRepository, Depends(get_booking_repository)]


# Use Cases
def get_proxy_chat_use_case(
    llm_client: LLMClientDep,
    settings: SettingsDep,
) -> ProxyChatUseCase:
    return ProxyChatUseCase(
        llm_client=llm_client,
        modes={
            ChatMode.CHAT: ModeConfig(
                model=settings.chat_model,
                max_tokens=settings.max_tokens,
                system_prompt=BOOKING_ASSISTANT_PROMPT,
            ),
            ChatMode.HOTEL: ModeConfig(
                model=settings.hotel_model,
                max_tokens=settings.max_tokens,
                system_prompt=BOOKING_ASSISTANT_PROMPT,
            ),
        },
        mcp_server=MCPServerSpec(name=settings.mcp_server_name, url=settings.mcp_url),
    )


ProxyChatUseCaseDep = Annotated[ProxyChatUseCase, Depends(get_proxy_chat_use_case)]


def get_send_message_use_case(
    chat_repository: ChatRepositoryDep,
    proxy: ProxyChatUseCaseDep,
) -> SendMessageUseCase:
    return SendMessageUseCase(chat_repository=chat_repository, proxy=proxy)


SendMessageUseCaseDep = Annotated[
    SendMessageUseCase, Depends(get_send_message_use_case)
]


def get_list_chats_use_case(chat_repository: ChatRepositoryDep) -> ListChatsUseCase:
    return ListChatsUseCase(chat_repository=chat_repository)


ListChatsUseCaseDep = Annotated[ListChatsUseCase, Depends(get_list_chats_use_case)]


def get_chat_use_case(chat_repository: ChatRepositoryDep) -> GetChatUseCase:
    return GetChatUseCase(chat_repository=chat_repository)


GetChatUseCaseDep = Annotated[GetChatUseCase, Depends(get_chat_use_case)]


def get_delete_chat_use_case(chat_repository: ChatRepositoryDep) -> DeleteChatUseCase:
    return DeleteChatUseCase(chat_repository=chat_repository)


DeleteChatUseCaseDep = Annotated[DeleteChatUseCase, Depends(get_delete_chat_use_case)]


def get_hotel_chat_use_case(proxy: ProxyChatUseCaseDep) -> HotelChatUseCase:
    return HotelChatUseCase(proxy=proxy)


HotelChatUseCaseDep = Annotated[HotelChatUseCase, Depends(get_hotel_chat_use_case)]


def get_record_booking_use_case(
    booking_repository: BookingRepositoryDep,
) -> RecordBookingUseCase:
    return RecordBookingUseCase(booking_repository=booking_repository)


RecordBookingUseCaseDep = Annotated[
    RecordBookingUseCase, Depends(get_record_booking_use_case)
]


def get_booking_use_case(booking_repository: BookingRepositoryDep) -> GetBookingUseCase:
    return GetBookingUseCase(booking_repository=booking_repository)


GetBookingUseCaseDep = Annotated[GetBookingUseCase, Depends(get_booking_use_case)]


def get_dashboard_use_case(
    analytics_client: AnalyticsClientDep,
    cache_service: CacheServiceDep,
    settings: SettingsDep,
) -> GetDashboardUseCase:
    return GetDashboardUseCase(
        analytics_client=analytics_client,
        cache_service=cache_service,
        cache_ttl_seconds=settings.analytics_cache_ttl_seconds,
    )


GetDashboardUseCaseDep = Annotated[GetDashboardUseCase, Depends(get_dashboard_use_case)]

"""Preset (app) configuration schema, generation 2."""

from typing import List, Literal

from pydantic import Field

from ...engine.model import ConfigModel
from ..shared.ci import CIConfig


class MetaConfig(ConfigModel):
    business_name: str = ''
    industry: str = ''
    description: str = ''
    logo: str = ''
    favicon: str = ''
    version: str = '1.0.0'
    repository: str = ''
    maintainers: List[str] = Field(default_factory=list)


class AppShellConfig(ConfigModel):
    app_type: str = ''
    framework: str = 'nextjs'
    language: str = 'typescript'
    runtime: str = 'node'
    ssr: bool = True
    pwa: bool = False
    target_users: List[str] = Field(default_factory=list)
    locales: List[str] = Field(default_factory=lambda: ['en'])


class AuthProvider(ConfigModel):
    type: str
    enabled: bool = True


class AuthSecurityConfig(ConfigModel):
    enabled: bool = True
    providers: List[AuthProvider] = Field(default_factory=lambda: [AuthProvider(type='email')])
    mfa: bool = False
    session_strategy: str = 'jwt'
    roles: List[str] = Field(default_factory=lambda: ['admin', 'user'])
    rbac: bool = False
    security_headers: bool = True
    encryption: bool = True
    brute_force_protection: bool = True


class EntityField(ConfigModel):
    name: str
    type: str
    required: bool = True


class Entity(ConfigModel):
    name: str
    fields: List[EntityField] = Field(default_factory=list)


class DatabaseConfig(ConfigModel):
    enabled: bool = True
    provider: str = 'postgresql'
    orm: str = 'prisma'
    entities: List[Entity] = Field(default_factory=list)
    audit: bool = False
    soft_delete: bool = False
    multi_tenancy: bool = False


class ApiConfig(ConfigModel):
    enabled: bool = True
    style: str = 'rest'
    versioning: bool = True
    graphql: bool = False
    rate_limit: bool = True
    rate_limit_max: int = 100
    cors: bool = True
    pagination: str = 'offset'


class Module(ConfigModel):
    id: str
    name: str
    description: str = ''


class FeaturesConfig(ConfigModel):
    core_features: List[str] = Field(default_factory=list)
    custom_features: str = ''
    modules: List[Module] = Field(default_factory=list)


class UiThemeConfig(ConfigModel):
    theme: Literal['light', 'dark', 'system'] = 'system'
    primary_color: str = '#0066FF'
    font_family: str = 'inter'
    dark_mode: bool = True
    component_library: str = 'shadcn'
    responsive: bool = True
    layout: str = 'sidebar'
    sidebar_collapsible: bool = True
    header_fixed: bool = True
    footer_enabled: bool = False


class PageDefinition(ConfigModel):
    id: str
    name: str
    route: str
    layout: str = 'default'
    auth_required: bool = True


class PagesConfig(ConfigModel):
    pages: List[PageDefinition] = Field(default_factory=list)
    breadcrumbs: bool = True


class StorageConfig(ConfigModel):
    enabled: bool = False
    provider: str = 's3'
    cdn: bool = False
    image_optimization: bool = True
    max_file_size: int = 10
    allowed_types: List[str] = Field(default_factory=lambda: ['images', 'documents'])


class NotificationChannel(ConfigModel):
    enabled: bool = False
    provider: str = ''


class NotificationsConfig(ConfigModel):
    enabled: bool = False
    in_app: NotificationChannel = Field(
        default_factory=lambda: NotificationChannel(enabled=True, provider='built-in')
    )
    email: NotificationChannel = Field(default_factory=NotificationChannel)
    push: NotificationChannel = Field(default_factory=NotificationChannel)
    sms: NotificationChannel = Field(default_factory=NotificationChannel)
    webhook: NotificationChannel = Field(default_factory=NotificationChannel)


class AiConfig(ConfigModel):
    enabled: bool = False
    provider: str = 'openai'
    features: List[str] = Field(default_factory=list)
    rag: bool = False
    guardrails: bool = False


class SearchConfig(ConfigModel):
    enabled: bool = False
    provider: str = 'built-in'
    indexing: str = 'realtime'
    fuzzy: bool = True


class AiSearchConfig(ConfigModel):
    ai: AiConfig = Field(default_factory=AiConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)


class PaymentPlan(ConfigModel):
    id: str
    name: str
    price: float = 0
    interval: str = 'monthly'


class PaymentsConfig(ConfigModel):
    enabled: bool = False
    provider: str = 'stripe'
    plans: List[PaymentPlan] = Field(default_factory=list)
    subscriptions: bool = False
    metered: bool = False
    invoicing: bool = False


class CronJob(ConfigModel):
    id: str
    name: str
    schedule: str = ''
    description: str = ''


class RealtimeBackgroundConfig(ConfigModel):
    realtime_enabled: bool = False
    presence: bool = False
    collaboration: bool = False
    cron_jobs: List[CronJob] = Field(default_factory=list)
    queue_provider: str = 'none'
    cache_provider: str = 'none'
    logging_provider: str = 'console'


class TestingCiCdConfig(ConfigModel):
    unit_framework: str = 'vitest'
    e2e_framework: str = 'playwright'
    coverage_target: int = Field(80, ge=0, le=100)
    ci_provider: str = 'github-actions'
    stages: List[str] = Field(default_factory=lambda: ['lint', 'typecheck', 'unit-test', 'build'])
    environments: List[str] = Field(default_factory=lambda: ['development', 'production'])


class IntegrationService(ConfigModel):
    id: str
    name: str
    type: str


class IntegrationsConfig(ConfigModel):
    services: List[IntegrationService] = Field(default_factory=list)
    webhooks: bool = False
    oauth2: bool = False
    api_keys: bool = False
    plugins: List[str] = Field(default_factory=list)
    workflows: List[str] = Field(default_factory=list)


class DeployConfig(ConfigModel):
    target: str = 'vercel'
    region: str = 'auto'
    domains: List[str] = Field(default_factory=list)
    env_vars: bool = True
    scaling: str = 'auto'
    docker: bool = False
    i18n: bool = False
    accessibility: bool = True
    seo: bool = True
    distribution_channels: List[str] = Field(default_factory=list)


class PresetConfig(ConfigModel):
    """Root of a preset configuration; every block defaults independently."""

    meta: MetaConfig = Field(default_factory=MetaConfig)
    ci: CIConfig = Field(default_factory=CIConfig)
    app: AppShellConfig = Field(default_factory=AppShellConfig)
    auth: AuthSecurityConfig = Field(default_factory=AuthSecurityConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    ui: UiThemeConfig = Field(default_factory=UiThemeConfig)
    pages: PagesConfig = Field(default_factory=PagesConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    ai_search: AiSearchConfig = Field(default_factory=AiSearchConfig)
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)
    realtime_background: RealtimeBackgroundConfig = Field(default_factory=RealtimeBackgroundConfig)
    testing_ci_cd: TestingCiCdConfig = Field(default_factory=TestingCiCdConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)
    deploy: DeployConfig = Field(default_factory=DeployConfig)

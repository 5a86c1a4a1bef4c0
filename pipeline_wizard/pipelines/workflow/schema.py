"""Workflow configuration schema, generation 2."""

from typing import List, Literal, Optional

from pydantic import Field

from ...engine.model import ConfigModel
from ..shared.ci import CIConfig


class WorkflowMeta(ConfigModel):
    name: str = ''
    version: str = '1.0.0'
    description: str = ''
    author: str = ''
    tags: List[str] = Field(default_factory=list)
    license: str = 'MIT'


# -- step builder -----------------------------------------------------------

class WorkflowTemplate(ConfigModel):
    id: str
    name: str
    type: Literal['document', 'spreadsheet', 'image', 'code', 'other'] = 'other'
    size: Optional[float] = None
    url: Optional[str] = None


class WorkflowLink(ConfigModel):
    id: str
    label: str
    url: str
    type: Literal['reference', 'documentation', 'api', 'external', 'internal'] = 'reference'


class WorkflowService(ConfigModel):
    id: str
    name: str
    type: Literal['rest', 'graphql', 'webhook', 'database', 'queue', 'storage'] = 'rest'
    endpoint: Optional[str] = None
    auth_type: Literal['none', 'api-key', 'oauth', 'bearer', 'basic'] = 'none'


class WorkflowStep(ConfigModel):
    """One step of the user's workflow (not a wizard step)."""

    id: str
    order: int = Field(0, ge=0)
    title: str = ''
    description: str = ''
    templates: List[WorkflowTemplate] = Field(default_factory=list)
    links: List[WorkflowLink] = Field(default_factory=list)
    services: List[WorkflowService] = Field(default_factory=list)
    is_expanded: bool = True
    type: Literal['action', 'condition', 'loop', 'parallel', 'delay', 'webhook', 'manual'] = 'action'
    condition: str = ''
    retries: int = Field(0, ge=0)
    input_mapping: str = ''
    output_mapping: str = ''
    error_handling: Literal['stop', 'skip', 'retry', 'fallback'] = 'stop'
    fallback_step_id: str = ''
    dependencies: List[str] = Field(default_factory=list)
    timeout: int = Field(0, ge=0)


# -- triggers, data, variables ----------------------------------------------

class WorkflowTrigger(ConfigModel):
    id: str
    type: Literal['manual', 'cron', 'webhook', 'event', 'api', 'file-watch', 'queue', 'schedule'] = 'manual'
    config: str = ''
    enabled: bool = True


class TriggersConfig(ConfigModel):
    triggers: List[WorkflowTrigger] = Field(default_factory=list)


class OrchestrationConfig(ConfigModel):
    mode: Literal['sequential', 'parallel', 'dag', 'saga', 'state-machine', 'event-driven'] = 'sequential'
    circuit_breaker: bool = False
    circuit_breaker_threshold: int = 5
    max_concurrency: int = 1
    retry_policy: Literal['none', 'fixed', 'exponential'] = 'exponential'
    retry_max: int = 3


class DataConnector(ConfigModel):
    id: str
    name: str
    type: Literal['database', 'api', 'file', 'stream', 'queue', 'cache'] = 'database'
    provider: str = ''
    connection_string: str = ''
    pool_size: int = 10
    health_check: bool = True


class DataConnectorsConfig(ConfigModel):
    connectors: List[DataConnector] = Field(default_factory=list)


class WorkflowVariable(ConfigModel):
    id: str
    key: str
    value: str = ''
    scope: Literal['global', 'environment', 'runtime', 'computed'] = 'global'


class VariablesConfig(ConfigModel):
    variables: List[WorkflowVariable] = Field(default_factory=list)


class SecretsConfig(ConfigModel):
    provider: Literal['env', 'vault', 'aws-secrets', 'gcp-secrets', 'azure-keyvault', 'doppler'] = 'env'
    keys: List[str] = Field(default_factory=list)
    rotation_enabled: bool = False


class StorageConfig(ConfigModel):
    enabled: bool = False
    type: Literal['local', 's3', 'gcs', 'azure-blob', 'minio'] = 'local'
    bucket: str = ''
    max_file_size: int = 10
    allowed_types: List[str] = Field(default_factory=list)


class CachingConfig(ConfigModel):
    enabled: bool = False
    provider: Literal['redis', 'memcached', 'upstash', 'in-memory', 'none'] = 'none'
    ttl: int = 3600
    strategy: Literal['lru', 'lfu', 'fifo', 'ttl'] = 'lru'


class QueueDefinition(ConfigModel):
    id: str
    name: str
    provider: Literal['bullmq', 'sqs', 'rabbitmq', 'kafka', 'inngest'] = 'bullmq'
    concurrency: int = 1


class QueuesConfig(ConfigModel):
    enabled: bool = False
    queues: List[QueueDefinition] = Field(default_factory=list)


# -- intelligence -----------------------------------------------------------

AiProviderName = Literal['openai', 'anthropic', 'google', 'mistral', 'deepseek', 'local', 'n8n']


class AiProvider(ConfigModel):
    id: str
    provider: AiProviderName
    enabled: bool = False
    model: str = ''
    mode: Literal['local', 'service', 'both'] = 'service'
    endpoint: str = ''


class AiIntegrationsConfig(ConfigModel):
    providers: List[AiProvider] = Field(default_factory=list)
    rag: bool = False
    rag_provider: str = ''
    guardrails: bool = False
    guardrails_config: str = ''
    fallback_enabled: bool = False
    fallback_provider: str = ''
    cost_tracking: bool = False


class WorkflowModule(ConfigModel):
    id: str
    name: str
    category: str = ''
    enabled: bool = True
    config: str = ''


class FeaturesConfig(ConfigModel):
    feature_ids: List[str] = Field(default_factory=list)
    custom_features: str = ''
    modules: List[WorkflowModule] = Field(default_factory=list)


class MiddlewareItem(ConfigModel):
    id: str
    name: str
    type: Literal['auth', 'logging', 'rate-limit', 'cors', 'compression', 'transform', 'validation', 'custom'] = 'custom'
    order: int = 0
    enabled: bool = True
    config: str = ''


class MiddlewareConfig(ConfigModel):
    items: List[MiddlewareItem] = Field(default_factory=list)


class WorkflowPlugin(ConfigModel):
    id: str
    name: str
    version: str = ''
    enabled: bool = True
    config: str = ''


class PluginsConfig(ConfigModel):
    plugins: List[WorkflowPlugin] = Field(default_factory=list)


class WorkflowExtension(ConfigModel):
    id: str
    name: str
    type: Literal['transform', 'validator', 'adapter', 'formatter', 'hook'] = 'transform'
    code: str = ''


class ExtensionsConfig(ConfigModel):
    extensions: List[WorkflowExtension] = Field(default_factory=list)


# -- security ---------------------------------------------------------------

class AuthMethod(ConfigModel):
    type: str
    enabled: bool = True
    config: str = ''


class AuthPolicy(ConfigModel):
    id: str
    name: str
    resource: str = ''
    action: str = ''
    roles: List[str] = Field(default_factory=list)


class AuthConfig(ConfigModel):
    enabled: bool = False
    methods: List[AuthMethod] = Field(default_factory=list)
    roles: List[str] = Field(default_factory=list)
    rbac: bool = False
    policies: List[AuthPolicy] = Field(default_factory=list)
    session_strategy: Literal['jwt', 'session', 'hybrid'] = 'jwt'
    session_ttl: int = 3600
    mfa: bool = False


class SecurityConfig(ConfigModel):
    encryption: Literal['aes-256', 'rsa', 'none'] = 'aes-256'
    cors: bool = True
    cors_origins: List[str] = Field(default_factory=list)
    csp: bool = False
    csp_directives: str = ''
    rate_limit: bool = True
    rate_limit_max: int = 100
    rate_limit_window: int = 60
    input_validation: bool = True
    compliance: List[str] = Field(default_factory=list)


class NotificationChannel(ConfigModel):
    id: str
    type: Literal['email', 'sms', 'push', 'webhook', 'slack', 'teams', 'in-app'] = 'email'
    provider: str = ''
    enabled: bool = True
    config: str = ''


class NotificationsConfig(ConfigModel):
    enabled: bool = False
    channels: List[NotificationChannel] = Field(default_factory=list)


class WorkflowHook(ConfigModel):
    id: str
    event: Literal['before-step', 'after-step', 'on-error', 'on-complete', 'on-start', 'on-cancel'] = 'on-complete'
    handler: str = ''
    enabled: bool = True


class HooksConfig(ConfigModel):
    hooks: List[WorkflowHook] = Field(default_factory=list)


# -- operations -------------------------------------------------------------

class LoggingConfig(ConfigModel):
    level: Literal['debug', 'info', 'warn', 'error', 'fatal'] = 'info'
    structured: bool = True
    provider: Literal['console', 'file', 'sentry', 'datadog', 'logtail', 'axiom'] = 'console'
    retention_days: int = 30


class MonitoringConfig(ConfigModel):
    enabled: bool = False
    provider: Literal['datadog', 'prometheus', 'grafana', 'newrelic', 'custom'] = 'prometheus'
    metrics: bool = False
    tracing: bool = False
    tracing_provider: str = ''
    health_checks: bool = True
    health_check_interval: int = 30
    alerting: bool = False
    alert_channels: List[str] = Field(default_factory=list)


class TestingConfig(ConfigModel):
    unit_framework: Literal['vitest', 'jest', 'node-test', 'none'] = 'vitest'
    integration_framework: Literal['vitest', 'jest', 'supertest', 'none'] = 'vitest'
    e2e_framework: Literal['playwright', 'cypress', 'none'] = 'playwright'
    load_testing: bool = False
    load_test_tool: str = ''
    coverage_target: int = Field(80, ge=0, le=100)
    dry_run: bool = False


class DeploymentEnvironment(ConfigModel):
    id: str
    name: str
    url: str = ''
    variables: List[str] = Field(default_factory=list)


class DeploymentConfig(ConfigModel):
    target: Literal['vercel', 'aws', 'gcp', 'docker', 'self-host', 'netlify', 'railway', ''] = ''
    region: str = ''
    multi_region: bool = False
    regions: List[str] = Field(default_factory=list)
    scaling: Literal['auto', 'fixed', 'serverless'] = 'auto'
    min_instances: int = 1
    max_instances: int = 1
    ci_provider: Literal['github-actions', 'gitlab-ci', 'circleci', 'vercel', 'none'] = 'github-actions'
    ci_stages: List[str] = Field(default_factory=lambda: ['lint', 'test', 'build', 'deploy'])
    rollback: bool = True
    rollback_strategy: Literal['automatic', 'manual'] = 'manual'
    environments: List[DeploymentEnvironment] = Field(default_factory=list)


class UiConfig(ConfigModel):
    theme: Literal['light', 'dark', 'system'] = 'system'
    primary_color: str = '#0ea5e9'
    layout: Literal['sidebar', 'topnav', 'minimal', 'dashboard'] = 'sidebar'
    font_family: str = 'inter'
    branding: str = ''
    component_library: str = 'shadcn'
    responsive: bool = True
    i18n: bool = False
    i18n_locales: List[str] = Field(default_factory=lambda: ['en'])
    accessibility: bool = True


class DocumentationConfig(ConfigModel):
    enabled: bool = True
    format: Literal['markdown', 'openapi', 'jsdoc', 'typedoc', 'storybook'] = 'markdown'
    auto_generate: bool = False
    output_dir: str = 'docs'
    include_examples: bool = True


class StoreListing(ConfigModel):
    id: str
    channel: str
    app_id: str = ''
    url: str = ''


class PublishingConfig(ConfigModel):
    business_model: str = ''
    distribution_channels: List[str] = Field(default_factory=list)
    license: str = ''
    custom_eula: str = ''
    release_strategy: str = 'stable'
    versioning: str = 'semver'
    custom_domain: str = ''
    auto_publish: bool = False
    changelog_enabled: bool = True
    store_listings: List[StoreListing] = Field(default_factory=list)


class WorkflowConfig(ConfigModel):
    """Root of a workflow configuration; every block defaults independently."""

    meta: WorkflowMeta = Field(default_factory=WorkflowMeta)
    steps: List[WorkflowStep] = Field(default_factory=list)
    triggers: TriggersConfig = Field(default_factory=TriggersConfig)
    orchestration: OrchestrationConfig = Field(default_factory=OrchestrationConfig)
    data_connectors: DataConnectorsConfig = Field(default_factory=DataConnectorsConfig)
    variables: VariablesConfig = Field(default_factory=VariablesConfig)
    secrets: SecretsConfig = Field(default_factory=SecretsConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    caching: CachingConfig = Field(default_factory=CachingConfig)
    queues: QueuesConfig = Field(default_factory=QueuesConfig)
    ai_integrations: AiIntegrationsConfig = Field(default_factory=AiIntegrationsConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    middleware: MiddlewareConfig = Field(default_factory=MiddlewareConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    extensions: ExtensionsConfig = Field(default_factory=ExtensionsConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    hooks: HooksConfig = Field(default_factory=HooksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)
    deployment: DeploymentConfig = Field(default_factory=DeploymentConfig)
    ui: UiConfig = Field(default_factory=UiConfig)
    documentation: DocumentationConfig = Field(default_factory=DocumentationConfig)
    ci: CIConfig = Field(default_factory=CIConfig)
    publishing: PublishingConfig = Field(default_factory=PublishingConfig)

from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str
    title: str


class CommandRules(BaseModel):
    enabled: list[str]


class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ApiRules(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8765
    cors_origins: list[str] = Field(default_factory=list)


class UiRules(BaseModel):
    window_title: str
    default_file_name: str = "visualization.bin"


class Rules(BaseModel):
    project: ProjectRules
    commands: CommandRules
    logging: LoggingRules = Field(default_factory=LoggingRules)
    api: ApiRules = Field(default_factory=ApiRules)
    ui: UiRules

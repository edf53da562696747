# vault/di.py
from dataclasses import dataclass
from vault.config import Settings
from vault.services.files import FileService
from vault.services.paths import PathConfiner
from vault.services.templates import TemplateEngine

@dataclass
class Container:
    settings: Settings
    confiner: PathConfiner
    templates: TemplateEngine
    file_service: FileService

def build_container(settings: Settings | None = None) -> Container:
    s = settings or Settings()
    s.WORK_FOLDER.mkdir(parents=True, exist_ok=True)

    confiner = PathConfiner(s.WORK_FOLDER)
    templates = TemplateEngine()
    files = FileService(confiner, templates)

    return Container(s, confiner, templates, files)

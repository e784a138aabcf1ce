# robots_warden/report.py

"""
Генерация JSON-отчёта по загруженному robots.txt.

Сериализация RobotsDocument в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict

from robots_warden.models import RobotsDocument


def build_report(document: RobotsDocument, success: bool) -> Dict[str, Any]:
    """Словарь отчёта: флаг успешной загрузки и снимок документа."""
    return {"success": success, "document": document.to_dict()}


def render_json(document: RobotsDocument, success: bool, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт о документе в формате JSON по указанному пути.

    :param document: заполненный RobotsDocument
    :param success: результат загрузки
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from robots_warden.report import render_json
    report_path = render_json(document, True, 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(build_report(document, success), f, ensure_ascii=False, indent=2)

    return output

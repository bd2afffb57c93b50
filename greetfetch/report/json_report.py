# greetfetch/report/json_report.py

"""
Генерация JSON-отчёта для проекта GreetFetch.

Сериализация результата загрузки (Outcome) в файл.
"""
from __future__ import annotations

import json
from pathlib import Path

from greetfetch.fetcher import Outcome


def render_json(outcome: Outcome, url: str, output_path: Path | str) -> Path:
    """
    Сохраняет результат загрузки url в формате JSON по указанному пути.

    :param outcome: Success или Failure, полученный от Fetcher
    :param url: запрошенный URL
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from greetfetch.report.json_report import render_json
    report_path = render_json(outcome, "http://goole.com", "reports/outcome.json")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {"url": url, **outcome.to_dict()}

    with output.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output

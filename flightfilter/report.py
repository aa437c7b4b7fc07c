from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import Flight
from .processing.flight_filter import ground_time

_TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


@dataclass(frozen=True, slots=True)
class FilterTask:
    """Titled result of a single filter call, as shown in the console listing and the HTML report."""
    title: str
    flights: tuple[Flight, ...]


def format_tasks(tasks: list[FilterTask]) -> str:
    blocks = []
    for task in tasks:
        lines = [f"{task.title}:"]
        lines.extend(str(flight) for flight in task.flights)
        blocks.append('\n'.join(lines))
    return '\n\n'.join(blocks)


def _format_ground_time(flight: Flight) -> str:
    minutes = int(ground_time(flight).total_seconds()) // 60
    return f"{minutes // 60}:{minutes % 60:02d}"


def render_html(tasks: list[FilterTask]) -> str:
    formatted = []
    for task in tasks:
        flights = []
        for flight in task.flights:
            flights.append({
                'segments': [
                    {
                        'departure': s.departure_date.strftime('%Y-%m-%d %H:%M'),
                        'arrival': s.arrival_date.strftime('%Y-%m-%d %H:%M'),
                    }
                    for s in flight.segments
                ],
                'ground_time': _format_ground_time(flight),
            })
        formatted.append({'title': task.title, 'flights': flights})

    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml', 'html.j2']),
    )
    tpl = env.get_template('filter_report.html.j2')
    generated_at = datetime.now().strftime("%d.%m.%Y %H:%M")
    rendered = tpl.render(tasks=formatted, generated_at=generated_at)
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()

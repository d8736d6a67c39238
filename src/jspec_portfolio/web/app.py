"""Gradio web interface for the JSPEC portfolio."""

import gradio as gr
import html
import logging
from typing import Any, List, Optional, Tuple

from ..config import Settings, settings as default_settings
from ..models.playback import PlaybackSession
from ..player.controller import VideoPlaybackController
from ..player.media import MediaElement, SimulatedMediaElement
from ..portfolio.section import PortfolioSection, PortfolioState
from ..sources import get_project_source, get_company_source
from ..sources.interface import ProjectSource, CompanySource
from ..sources.utils import api_call
from ..utils.formatting import format_time

logger = logging.getLogger(__name__)

GRID_HEADERS = ["Project", "Client", "Contractor", "Location", "Status", "Dates", "Tags", "Progress", "Video"]

# Slider range while no duration is known
SLIDER_MAX = 100

ViewerOutputs = Tuple[str, Any]


class PortfolioApp:
    """Gradio application for the portfolio section and video viewer."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[ProjectSource] = None,
        company_source: Optional[CompanySource] = None,
        media: Optional[MediaElement] = None,
    ):
        """Initialize the application."""
        self.settings = settings or default_settings
        self.source = source or get_project_source(self.settings)
        self.company_source = company_source or get_company_source(self.settings)
        self.player = VideoPlaybackController(
            media or SimulatedMediaElement(),
            hide_delay=self.settings.controls_hide_delay,
        )
        self.section = PortfolioSection(
            self.source,
            player=self.player,
            placeholder_image=self.settings.placeholder_image,
        )
        logger.info(f"Initialized app with {type(self.source).__name__}")

    def create_interface(self) -> gr.Blocks:
        """Create the Gradio interface."""
        with gr.Blocks(title="JSPEC INDIA - Our Portfolio") as app:
            gr.Markdown(
                """
                # Our Portfolio

                Bridge segment erection and heavy lifting projects delivered across India and abroad.
                """
            )

            with gr.Tabs():
                # Tab 1: Projects
                with gr.TabItem("Projects"):
                    stats = gr.Markdown(elem_id="project_stats")
                    error_box = gr.Markdown(visible=True, elem_id="load_error")
                    retry_btn = gr.Button("Try Again", visible=False, elem_id="retry_button")

                    grid = gr.Dataframe(
                        headers=GRID_HEADERS,
                        interactive=False,
                        wrap=True,
                        elem_id="project_grid"
                    )

                    with gr.Row():
                        project_picker = gr.Dropdown(
                            label="Project",
                            choices=[],
                            elem_id="project_picker"
                        )
                        open_btn = gr.Button("▶ Watch Video", variant="primary", elem_id="open_viewer")

                    # Video viewer
                    viewer = gr.HTML(elem_id="video_viewer")
                    with gr.Row():
                        play_btn = gr.Button("Play / Pause")
                        restart_btn = gr.Button("Restart")
                        mute_btn = gr.Button("Mute")
                        fullscreen_btn = gr.Button("Fullscreen")
                        close_btn = gr.Button("Close", variant="stop")
                    seek_slider = gr.Slider(
                        minimum=0,
                        maximum=SLIDER_MAX,
                        value=0,
                        label="Position (seconds)",
                        elem_id="seek_slider"
                    )
                    clock = gr.Timer(self.settings.viewer_refresh_interval)

                # Tab 2: Company
                with gr.TabItem("About Us"):
                    company = gr.Markdown(elem_id="company_info")

            grid_outputs = [stats, grid, error_box, retry_btn, project_picker]

            # Event handlers
            app.load(fn=self.load_portfolio, outputs=grid_outputs)
            app.load(fn=self.load_company, outputs=[company])
            retry_btn.click(fn=self.retry, outputs=grid_outputs)

            # Viewer handlers are coroutines; they run on the loop that drives the media clock
            viewer_outputs = [viewer, seek_slider]
            open_btn.click(fn=self.open_project, inputs=[project_picker], outputs=viewer_outputs)
            play_btn.click(fn=self.toggle_play, outputs=viewer_outputs)
            restart_btn.click(fn=self.restart, outputs=viewer_outputs)
            mute_btn.click(fn=self.toggle_mute, outputs=viewer_outputs)
            fullscreen_btn.click(fn=self.toggle_fullscreen, outputs=viewer_outputs)
            close_btn.click(fn=self.close_viewer, outputs=viewer_outputs)
            seek_slider.release(fn=self.seek, inputs=[seek_slider], outputs=viewer_outputs)
            clock.tick(fn=self.refresh_viewer, outputs=viewer_outputs)

        return app

    # Portfolio

    async def load_portfolio(self) -> Tuple[str, List[List[Any]], str, Any, Any]:
        """Load projects and render the grid outputs."""
        await self.section.load_projects()
        return self._render_section(self.section.state)

    async def retry(self) -> Tuple[str, List[List[Any]], str, Any, Any]:
        await self.section.retry()
        return self._render_section(self.section.state)

    def _render_section(self, state: PortfolioState) -> Tuple[str, List[List[Any]], str, Any, Any]:
        error_text = ""
        if state.has_error:
            error_text = f"### Error Loading Projects\n\n{state.error}"

        choices = [(p.title, p.id) for p in state.projects if p.has_video]
        return (
            render_stats(state),
            render_grid(self.section),
            error_text,
            gr.update(visible=state.has_error),
            gr.update(choices=choices, value=None),
        )

    async def load_company(self) -> str:
        """Load company content, or a short notice if it is unavailable."""
        result = await api_call(self.company_source.load_company_data)
        if not result.ok:
            return f"_{result.error}_"

        data = result.data
        lines = [
            f"**{data.stats.years_experience}+** years experience · "
            f"**{data.stats.projects_completed}+** projects · "
            f"**{data.stats.countries}** countries · "
            f"**{data.stats.success_rate}%** success rate",
            "",
            "## Services",
        ]
        for service in data.services:
            lines.append(f"### {service.title}")
            lines.append(service.description)
            lines.extend(f"- {feature}" for feature in service.features)
        if data.testimonials:
            lines.append("## What Our Clients Say")
            for testimonial in data.testimonials:
                lines.append(f"> {testimonial.content}")
                lines.append(f">\n> {testimonial.name}, {testimonial.position}, {testimonial.company}")
        if data.certifications:
            lines.append("## Certifications")
            for cert in data.certifications:
                lines.append(f"- {cert.name} ({cert.issuer}, {cert.issued_on.year})")
        return "\n".join(lines)

    # Video viewer

    async def open_project(self, project_id: Optional[str]) -> ViewerOutputs:
        if not project_id:
            return self._render_viewer()
        project = self.section.get_project(project_id)
        if project is None:
            logger.warning(f"Unknown project selected: {project_id}")
            return self._render_viewer()
        self.section.view_project(project)
        return self._render_viewer()

    async def toggle_play(self) -> ViewerOutputs:
        await self.player.toggle_play()
        return self._render_viewer()

    async def restart(self) -> ViewerOutputs:
        await self.player.restart()
        return self._render_viewer()

    async def toggle_mute(self) -> ViewerOutputs:
        self.player.toggle_mute()
        return self._render_viewer()

    async def toggle_fullscreen(self) -> ViewerOutputs:
        self.player.toggle_fullscreen()
        return self._render_viewer()

    async def seek(self, seconds: float) -> ViewerOutputs:
        self.player.seek(seconds)
        return self._render_viewer()

    async def close_viewer(self) -> ViewerOutputs:
        self.section.close_viewer()
        return self._render_viewer()

    async def refresh_viewer(self) -> ViewerOutputs:
        """Timer tick: re-render with the latest clock and duration."""
        return self._render_viewer()

    def _render_viewer(self) -> ViewerOutputs:
        session = self.player.session
        return (
            render_viewer(session, self.settings.placeholder_poster),
            slider_update(session),
        )


def render_stats(state: PortfolioState) -> str:
    """Statistics strip above the grid."""
    if state.loading:
        return "_Loading projects..._"
    return (
        f"**{state.stats.total}** Total Projects · "
        f"**{state.stats.completed}** Completed · "
        f"**{state.stats.in_progress}** Ongoing"
    )


def render_grid(section: PortfolioSection) -> List[List[Any]]:
    """One row per project card."""
    rows = []
    for card in section.cards:
        rows.append([
            card.title,
            card.client,
            card.contractor,
            card.location,
            card.status_label,
            card.date_range,
            ", ".join(card.tags),
            f"{card.progress}%" if card.progress is not None else "",
            "▶" if card.show_play else "",
        ])
    return rows


def slider_update(session: Optional[PlaybackSession]) -> Any:
    """Seek slider range and position for the current session."""
    if session is None or session.duration_seconds <= 0:
        return gr.update(maximum=SLIDER_MAX, value=0)
    return gr.update(maximum=session.duration_seconds, value=session.position_seconds)


def render_viewer(session: Optional[PlaybackSession], poster: str) -> str:
    """HTML for the video viewer panel."""
    if session is None:
        return ""

    title = html.escape(session.title)
    parts = [f"<h3>{title}</h3>"]
    if session.description:
        parts.append(f"<p>{html.escape(session.description)}</p>")

    if session.has_media:
        parts.append(
            f'<video src="{html.escape(session.media_ref)}" poster="{html.escape(poster)}" '
            f'{"muted " if session.muted else ""}style="width:100%"></video>'
        )
    else:
        parts.append(f'<img src="{html.escape(poster)}" alt="{title}" style="width:100%"/>')

    if session.error:
        parts.append(f'<p class="error">{html.escape(session.error)}</p>')

    status = [
        "Playing" if session.playing else "Paused",
        f"{format_time(session.position_seconds)} / {format_time(session.duration_seconds)}",
    ]
    if session.muted:
        status.append("Muted")
    if session.fullscreen:
        status.append("Fullscreen")
    parts.append(f"<p>{' · '.join(status)}</p>")
    return "\n".join(parts)


def launch_app(share: bool = False, port: int = 7860):
    """Launch the Gradio application.

    Args:
        share: If True, create a public share link
        port: Port to run the server on
    """
    app_instance = PortfolioApp()
    interface = app_instance.create_interface()

    interface.launch(
        share=share,
        server_port=port,
        server_name="0.0.0.0",
        show_error=True
    )

from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for

from ..auth.controller import login_required
from ..container import Container
from ..core.exceptions import AgentNotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def _agent_view(agent) -> dict:
    return {"id": agent.id, "nom": agent.name, "poste": agent.note, "matricule": agent.badge_code}


def register(app: Flask, container: Container) -> None:
    def _server_error(e: Exception):
        logger.exception("agents: storage failure")
        return f"Erreur serveur : {e}", 500

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            agents = [_agent_view(a) for a in container.agent_service.list_agents()]
        except StorageError as e:
            return _server_error(e)
        return render_template("dashboard.html", page_title="Dashboard", agents=agents)

    @app.route("/agents", methods=["GET"], endpoint="agents")
    @login_required
    def agents():
        try:
            rows = [_agent_view(a) for a in container.agent_service.list_agents()]
        except StorageError as e:
            return _server_error(e)
        return render_template("agents.html", page_title="Agents", agents=rows)

    @app.route("/agents", methods=["POST"], endpoint="add_agent")
    @login_required
    def add_agent():
        try:
            container.agent_service.create_agent(
                name=request.form.get("nom"),
                note=request.form.get("poste"),
                badge_code=request.form.get("matricule"),
            )
        except ValidationError:
            return "Nom et poste requis.", 400
        except StorageError as e:
            return _server_error(e)
        return redirect(url_for("agents"))

    @app.route("/agents/<int:agent_id>/delete", methods=["POST"], endpoint="delete_agent")
    @login_required
    def delete_agent(agent_id: int):
        try:
            container.agent_service.delete_agent(agent_id)
        except AgentNotFoundError:
            logger.info("agents: delete of unknown agent %s ignored", agent_id)
        except StorageError as e:
            return _server_error(e)
        return redirect(url_for("agents"))

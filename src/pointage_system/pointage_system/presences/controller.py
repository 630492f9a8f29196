from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..auth.controller import login_required
from ..container import Container
from ..core.enums import PunchSource, PunchType
from ..core.exceptions import AgentNotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _badgeuse_redirect(**params):
        return redirect(url_for("badgeuse", **params))

    @app.route("/pointage/<int:agent_id>", endpoint="pointage")
    @login_required
    def pointage(agent_id: int):
        try:
            container.punch_service.record_dashboard_punch(agent_id)
        except AgentNotFoundError:
            return "Agent introuvable", 404
        except StorageError as e:
            logger.exception("pointage: storage failure")
            return f"Erreur serveur : {e}", 500
        return redirect(url_for("dashboard"))

    @app.route("/historique", endpoint="historique")
    @login_required
    def historique():
        nom = request.args.get("nom", "").strip()
        try:
            records = container.history_service.build_history(nom or None)
        except StorageError as e:
            logger.exception("historique: storage failure")
            return f"Erreur serveur : {e}", 500
        return render_template(
            "historique.html",
            page_title="Historique",
            historique=[r.to_dict() for r in records],
            nom=nom,
        )

    @app.route("/api/historique", endpoint="api_historique")
    @login_required
    def api_historique():
        nom = request.args.get("nom", "").strip()
        try:
            records = container.history_service.build_history(nom or None)
        except StorageError as e:
            logger.exception("api/historique: storage failure")
            return jsonify({"error": str(e)}), 500
        return jsonify([r.to_dict() for r in records])

    # Badgeuse virtuelle (web)

    @app.route("/badgeuse", methods=["GET"], endpoint="badgeuse")
    @login_required
    def badgeuse():
        return render_template(
            "badgeuse.html",
            page_title="Badgeuse virtuelle",
            message=request.args.get("message"),
            error=request.args.get("error"),
            punch_types=[t.value for t in PunchType],
        )

    @app.route("/badgeuse", methods=["POST"], endpoint="badgeuse_submit")
    @login_required
    def badgeuse_submit():
        try:
            agent = container.punch_service.record_punch(
                request.form.get("badge"),
                request.form.get("type") or None,
                PunchSource.BADGEUSE_VIRTUELLE.value,
            )
        except ValidationError:
            return _badgeuse_redirect(error="Code badge obligatoire")
        except AgentNotFoundError:
            return _badgeuse_redirect(error="Aucun agent trouvé pour ce badge")
        except StorageError as e:
            logger.exception("badgeuse: storage failure")
            return _badgeuse_redirect(error=f"Erreur serveur : {e}")
        return _badgeuse_redirect(message=f"Pointage enregistré pour {agent.name}")

    # API pour badgeuse physique (pas de session)

    @app.route("/api/pointage", methods=["POST"], endpoint="api_pointage")
    def api_pointage():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            data = request.form
        badge = data.get("badge")
        # JSON 0 / false count as missing, like an empty string
        badge = str(badge) if badge else None

        try:
            container.punch_service.record_punch(
                badge,
                str(data.get("type") or "") or None,
                PunchSource.BADGEUSE_API.value,
            )
        except ValidationError:
            return jsonify({"error": "Code badge manquant"}), 400
        except AgentNotFoundError:
            return jsonify({"error": "Agent inconnu pour ce badge"}), 404
        except StorageError as e:
            logger.exception("api/pointage: storage failure")
            return jsonify({"error": str(e)}), 500
        return jsonify({"ok": True})

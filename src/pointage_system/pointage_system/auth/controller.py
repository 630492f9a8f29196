from __future__ import annotations

from datetime import timedelta
from functools import wraps

from flask import Flask, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import SESSION_HOURS
from ..core.exceptions import AuthenticationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user" not in session:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(hours=SESSION_HOURS)

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html", page_title="Mulykap - Accueil")

    @app.route("/home", endpoint="home")
    def home():
        return render_template("index.html", page_title="Mulykap - Accueil")

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "POST":
            try:
                s_user = container.auth_service.authenticate(
                    request.form.get("username", ""),
                    request.form.get("password", ""),
                )
            except AuthenticationError as e:
                return render_template("login.html", page_title="Connexion", error=str(e))

            session.permanent = True
            session["user"] = {"username": s_user.username}
            return redirect(url_for("dashboard"))

        return render_template("login.html", page_title="Connexion", error=None)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        return redirect(url_for("login"))

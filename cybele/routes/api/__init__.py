# cybele/routes/api/__init__.py
from flask import Blueprint

# JSON API for workouts, exercises and runs
api_bp = Blueprint("api", __name__)

# importing the modules registers their routes on the blueprint
from . import workouts, runs, health

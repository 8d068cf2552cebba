"""
WaterWatch Application Entry Point
Water Test Reporting and Alerting API
"""
from waterwatch import create_app, db
from waterwatch.models import User, WaterTest, LeaderAlert, GlobalAlert, HealthCard

# Create Flask application instance
app = create_app()

# Flask shell context
@app.shell_context_processor
def make_shell_context():
    """Make database and models available in flask shell"""
    return {
        'db': db,
        'User': User,
        'WaterTest': WaterTest,
        'LeaderAlert': LeaderAlert,
        'GlobalAlert': GlobalAlert,
        'HealthCard': HealthCard
    }

if __name__ == '__main__':
    # Run development server
    app.run(
        host='0.0.0.0',
        port=5050,
        debug=True
    )

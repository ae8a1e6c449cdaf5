"""
Predefined app compositions built from the basic capsules.

Every template here assembles against the default registry.
"""

from __future__ import annotations

from capsule_studio.specs.composition import AppComposition, CapsuleInstance, LayoutKind

APP_TEMPLATES: dict[str, AppComposition] = {
    "todo-app": AppComposition(
        name="Todo App",
        description="A simple and functional todo list application",
        layout=LayoutKind.SINGLE,
        capsules=[
            CapsuleInstance(capsule_id="todolist", instance_id="main", props={"title": "My Tasks"}),
        ],
    ),
    "calculator": AppComposition(
        name="Calculator App",
        description="Simple calculator with counter",
        layout=LayoutKind.GRID,
        capsules=[
            CapsuleInstance(
                capsule_id="counter", instance_id="calc1", props={"title": "Counter 1", "initial": 0}
            ),
            CapsuleInstance(
                capsule_id="counter", instance_id="calc2", props={"title": "Counter 2", "initial": 10}
            ),
        ],
    ),
    "contact-form": AppComposition(
        name="Contact Form",
        description="Professional contact form",
        layout=LayoutKind.SINGLE,
        capsules=[
            CapsuleInstance(
                capsule_id="form",
                instance_id="contact",
                props={
                    "title": "Get in Touch",
                    "fields": [
                        {"name": "name", "label": "Full Name", "type": "text"},
                        {"name": "email", "label": "Email Address", "type": "email"},
                        {"name": "message", "label": "Message", "type": "textarea"},
                    ],
                },
            ),
        ],
    ),
    "dashboard": AppComposition(
        name="Dashboard",
        description="Simple dashboard with cards and stats",
        layout=LayoutKind.GRID,
        capsules=[
            CapsuleInstance(
                capsule_id="card",
                instance_id="card1",
                props={"title": "Total Users", "content": "1,234 active users this month"},
            ),
            CapsuleInstance(
                capsule_id="card",
                instance_id="card2",
                props={"title": "Revenue", "content": "$12,345 in total revenue"},
            ),
            CapsuleInstance(
                capsule_id="card",
                instance_id="card3",
                props={"title": "Tasks Completed", "content": "89% completion rate"},
            ),
            CapsuleInstance(
                capsule_id="list",
                instance_id="tasks",
                props={
                    "title": "Recent Activity",
                    "items": ["User John signed up", "New order received", "Payment processed"],
                },
            ),
        ],
    ),
    "timer-app": AppComposition(
        name="Timer & Counter",
        description="Productivity timer and counter application",
        layout=LayoutKind.GRID,
        capsules=[
            CapsuleInstance(
                capsule_id="timer",
                instance_id="pomodoro",
                props={"title": "Pomodoro Timer", "seconds": 1500},
            ),
            CapsuleInstance(
                capsule_id="counter",
                instance_id="sessions",
                props={"title": "Sessions Completed", "initial": 0},
            ),
        ],
    ),
    "tabs-demo": AppComposition(
        name="Tabbed Interface",
        description="Multi-tab content interface",
        layout=LayoutKind.SINGLE,
        capsules=[
            CapsuleInstance(
                capsule_id="tabs",
                instance_id="main",
                props={
                    "tabs": [
                        {"label": "Home", "content": "Welcome to our application!"},
                        {"label": "Features", "content": "Explore our amazing features"},
                        {"label": "About", "content": "Learn more about us"},
                        {"label": "Contact", "content": "Get in touch with our team"},
                    ]
                },
            ),
        ],
    ),
    "ui-components": AppComposition(
        name="UI Components Showcase",
        description="Collection of reusable UI components",
        layout=LayoutKind.GRID,
        capsules=[
            CapsuleInstance(
                capsule_id="button",
                instance_id="btn1",
                props={"text": "Primary Button", "variant": "primary"},
            ),
            CapsuleInstance(
                capsule_id="button",
                instance_id="btn2",
                props={"text": "Secondary Button", "variant": "secondary"},
            ),
            CapsuleInstance(
                capsule_id="button",
                instance_id="btn3",
                props={"text": "Danger Button", "variant": "danger"},
            ),
            CapsuleInstance(
                capsule_id="input",
                instance_id="input1",
                props={"label": "Username", "placeholder": "Enter your username"},
            ),
            CapsuleInstance(
                capsule_id="input",
                instance_id="input2",
                props={
                    "label": "Password",
                    "placeholder": "Enter your password",
                    "type": "password",
                },
            ),
            CapsuleInstance(
                capsule_id="modal",
                instance_id="modal1",
                props={
                    "title": "Welcome!",
                    "content": "Click the button to see this modal in action.",
                },
            ),
        ],
    ),
    "landing-page": AppComposition(
        name="Landing Page",
        description="Simple landing page with sections",
        layout=LayoutKind.FLEX,
        capsules=[
            CapsuleInstance(
                capsule_id="card",
                instance_id="hero",
                props={
                    "title": "Welcome to Our Product",
                    "content": "The best solution for your business needs",
                },
            ),
            CapsuleInstance(
                capsule_id="card",
                instance_id="feature1",
                props={
                    "title": "Fast & Reliable",
                    "content": "Lightning-fast performance you can count on",
                },
            ),
            CapsuleInstance(
                capsule_id="card",
                instance_id="feature2",
                props={
                    "title": "Easy to Use",
                    "content": "Intuitive interface that anyone can master",
                },
            ),
            CapsuleInstance(
                capsule_id="card",
                instance_id="feature3",
                props={
                    "title": "Secure",
                    "content": "Enterprise-grade security for your data",
                },
            ),
            CapsuleInstance(
                capsule_id="form",
                instance_id="signup",
                props={
                    "title": "Get Started",
                    "fields": [{"name": "email", "label": "Email", "type": "email"}],
                },
            ),
        ],
    ),
}


def get_app_template(template_id: str) -> AppComposition | None:
    """Return a predefined composition by id, or None if unknown."""
    return APP_TEMPLATES.get(template_id)


def list_app_templates() -> list[tuple[str, AppComposition]]:
    """Return all predefined compositions as (id, composition) pairs."""
    return list(APP_TEMPLATES.items())

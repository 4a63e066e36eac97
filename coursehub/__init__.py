"""CourseHub API: accounts, roles and courses for an educational platform."""

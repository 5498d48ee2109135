# /clinic/api/routes.py

from clinic.api import api_bp
from clinic.extensions import limiter
from clinic.utils.decorators import audit_log
from .controllers import (dashboard_controller, appointment_controller, patient_controller, invoice_controller,
                          drug_controller, review_controller, contact_controller, settings_controller,
                          preferences_controller, todo_controller)


# --- Pages ---
@api_bp.route('/', methods=['GET'])
def landing_page():
    return dashboard_controller.landing_page()

@api_bp.route('/dashboard', methods=['GET'])
def dashboard_page():
    return dashboard_controller.dashboard_page()

@api_bp.route('/doctor-profile', methods=['GET'])
def doctor_profile_page():
    return dashboard_controller.doctor_profile_page()

@api_bp.route('/account-settings', methods=['GET'])
def account_settings_page():
    return settings_controller.account_settings_page()

@api_bp.route('/invoices', methods=['GET'])
def invoices_page():
    return invoice_controller.invoices_page()

@api_bp.route('/create-invoice', methods=['GET'])
def create_invoice_page():
    return invoice_controller.create_invoice_page()

@api_bp.route('/book-appointment', methods=['GET'])
def book_appointment_page():
    return appointment_controller.book_appointment_page()

@api_bp.route('/approved-appointments', methods=['GET'])
def approved_appointments_page():
    return appointment_controller.approved_appointments_page()

@api_bp.route('/canceled-appointments', methods=['GET'])
def canceled_appointments_page():
    return appointment_controller.canceled_appointments_page()

@api_bp.route('/patients', methods=['GET'])
def patients_page():
    return patient_controller.patients_page()

@api_bp.route('/add-patient', methods=['GET'])
def add_patient_page():
    return patient_controller.add_patient_page()

@api_bp.route('/patient-profile', methods=['GET'])
def patient_profile_page():
    return patient_controller.patient_profile_page()

@api_bp.route('/drugs', methods=['GET'])
def drugs_page():
    return drug_controller.drugs_page()

@api_bp.route('/add-drug', methods=['GET'])
def add_drug_page():
    return drug_controller.add_drug_page()

@api_bp.route('/reviews', methods=['GET'])
def reviews_page():
    return review_controller.reviews_page()

@api_bp.route('/contact-requests', methods=['GET'])
def contact_requests_page():
    return contact_controller.contact_requests_page()


# --- JSON Lookups ---
@api_bp.route('/api/invoices/<invoice_id>', methods=['GET'])
def get_invoice(invoice_id):
    return invoice_controller.get_invoice(invoice_id)

@api_bp.route('/api/appointments/<appointment_id>', methods=['GET'])
def get_appointment(appointment_id):
    return appointment_controller.get_appointment(appointment_id)

@api_bp.route('/api/drug/<drug_id>', methods=['GET'])
def get_drug(drug_id):
    return drug_controller.get_drug(drug_id)

@api_bp.route('/api/patients/<patient_id>', methods=['GET'])
def get_patient(patient_id):
    return patient_controller.get_patient(patient_id)

@api_bp.route('/user/theme', methods=['GET'])
def get_theme():
    return preferences_controller.get_theme()

@api_bp.route('/reviews/count', methods=['GET'])
def review_count():
    return review_controller.review_count()

@api_bp.route('/contacts/count', methods=['GET'])
def contact_count():
    return contact_controller.contact_count()


# --- Appointment Endpoints ---
@api_bp.route('/book-appointment', methods=['POST'])
@audit_log("BOOK_APPOINTMENT", "appointments")
def book_appointment():
    return appointment_controller.book_appointment()

@api_bp.route('/online-appointment-booking', methods=['POST'])
@limiter.limit("10 per hour")
@audit_log("BOOK_ONLINE_APPOINTMENT", "appointments")
def book_online_appointment():
    return appointment_controller.book_online_appointment()

@api_bp.route('/update-appointment', methods=['POST'])
@audit_log("UPDATE_APPOINTMENT", "appointments")
def update_appointment():
    return appointment_controller.update_appointment()

@api_bp.route('/approve-appointment', methods=['POST'])
@audit_log("APPROVE_APPOINTMENT", "appointments")
def approve_appointment():
    return appointment_controller.approve_appointment()

@api_bp.route('/delete-appointment/<appointment_id>', methods=['DELETE'])
@audit_log("CANCEL_APPOINTMENT", "appointments")
def cancel_appointment(appointment_id):
    return appointment_controller.cancel_appointment(appointment_id)

@api_bp.route('/del-past-appointment/<appointment_id>', methods=['DELETE'])
@audit_log("DELETE_PAST_APPOINTMENT", "appointments")
def delete_past_appointment(appointment_id):
    return appointment_controller.delete_past_appointment(appointment_id)


# --- Patient Endpoints ---
@api_bp.route('/add-patient', methods=['POST'])
@audit_log("CREATE_PATIENT", "patients")
def add_patient():
    return patient_controller.add_patient()

@api_bp.route('/patient-profile', methods=['POST'])
@audit_log("UPDATE_PATIENT", "patients")
def update_patient_profile():
    return patient_controller.update_patient_profile()

@api_bp.route('/delete-patient/<patient_id>', methods=['DELETE'])
@audit_log("DELETE_PATIENT", "patients")
def delete_patient(patient_id):
    return patient_controller.delete_patient(patient_id)

@api_bp.route('/patients/<patient_id>/lastvisit', methods=['POST'])
@audit_log("ADD_LAST_VISIT", "patients")
def add_last_visit(patient_id):
    return patient_controller.add_last_visit(patient_id)

@api_bp.route('/patients/<patient_id>/updateStatus', methods=['POST'])
@audit_log("UPDATE_PATIENT_STATUS", "patients")
def update_patient_status(patient_id):
    return patient_controller.update_status(patient_id)


# --- Invoice Endpoints ---
@api_bp.route('/patients/<patient_id>/invoices', methods=['POST'])
@audit_log("CREATE_INVOICE", "invoices")
def create_invoice(patient_id):
    return invoice_controller.create_invoice(patient_id)

@api_bp.route('/delete-invoice/<invoice_id>', methods=['DELETE'])
@audit_log("DELETE_INVOICE", "invoices")
def delete_invoice(invoice_id):
    return invoice_controller.delete_invoice(invoice_id)

@api_bp.route('/generate-pdf', methods=['POST'])
@audit_log("SEND_INVOICE", "invoices")
def generate_pdf():
    return invoice_controller.generate_pdf()

@api_bp.route('/download-pdf', methods=['POST'])
@audit_log("DOWNLOAD_INVOICE", "invoices")
def download_pdf():
    return invoice_controller.download_pdf()

@api_bp.route('/sse', methods=['GET'])
def general_stream():
    return invoice_controller.general_stream()


# --- Drug Endpoints ---
@api_bp.route('/add-drug', methods=['POST'])
@audit_log("SAVE_DRUG", "drugs")
def add_drug():
    return drug_controller.add_drug()

@api_bp.route('/delete-drug/<drug_id>', methods=['DELETE'])
@audit_log("DELETE_DRUG", "drugs")
def delete_drug(drug_id):
    return drug_controller.delete_drug(drug_id)


# --- Review Endpoints ---
@api_bp.route('/rate', methods=['POST'])
@limiter.limit("5 per hour")
@audit_log("SUBMIT_REVIEW", "reviews")
def submit_review():
    return review_controller.submit_review()

@api_bp.route('/active-review/<review_id>', methods=['POST'])
@audit_log("TOGGLE_REVIEW", "reviews")
def toggle_review(review_id):
    return review_controller.toggle_active(review_id)

@api_bp.route('/delete-review/<review_id>', methods=['DELETE'])
@audit_log("DELETE_REVIEW", "reviews")
def delete_review(review_id):
    return review_controller.delete_review(review_id)

@api_bp.route('/sse/reviews', methods=['GET'])
def review_stream():
    return review_controller.review_stream()


# --- Contact Endpoints ---
@api_bp.route('/contact', methods=['POST'])
@limiter.limit("5 per hour")
@audit_log("SUBMIT_CONTACT", "contacts")
def submit_contact():
    return contact_controller.submit_contact()

@api_bp.route('/contact-person/<contact_id>', methods=['POST'])
@audit_log("TOGGLE_CONTACTED", "contacts")
def toggle_contacted(contact_id):
    return contact_controller.toggle_contacted(contact_id)

@api_bp.route('/delete-contact/<contact_id>', methods=['DELETE'])
@audit_log("DELETE_CONTACT", "contacts")
def delete_contact(contact_id):
    return contact_controller.delete_contact(contact_id)

@api_bp.route('/sse/contacts', methods=['GET'])
def contact_stream():
    return contact_controller.contact_stream()


# --- Settings Endpoints ---
@api_bp.route('/clinic-info', methods=['POST'])
@audit_log("SAVE_CLINIC_INFO", "settings")
def save_clinic_info():
    return settings_controller.save_clinic_info()

@api_bp.route('/doctor-info', methods=['POST'])
@audit_log("SAVE_DOCTOR_INFO", "settings")
def save_doctor_info():
    return settings_controller.save_doctor_info()

@api_bp.route('/social-media', methods=['POST'])
@audit_log("SAVE_SOCIAL_MEDIA", "settings")
def save_social_media():
    return settings_controller.save_social_media()

@api_bp.route('/doctor-photos', methods=['POST'])
@audit_log("UPLOAD_DOCTOR_PHOTO", "settings")
def upload_doctor_photo():
    return settings_controller.upload_doctor_photo()

@api_bp.route('/clinic-photos', methods=['POST'])
@audit_log("UPLOAD_CLINIC_PHOTO", "settings")
def upload_clinic_photo():
    return settings_controller.upload_clinic_photo()

@api_bp.route('/uploads/<path:filename>', methods=['GET'])
def uploaded_file(filename):
    return settings_controller.uploaded_file(filename)


# --- Preference Endpoints ---
@api_bp.route('/update-theme', methods=['POST'])
def update_theme():
    return preferences_controller.update_theme()

@api_bp.route('/update-sidebar', methods=['POST'])
def update_sidebar():
    return preferences_controller.update_sidebar()

@api_bp.route('/user-preferences', methods=['POST'])
@audit_log("UPDATE_PREFERENCES", "preferences")
def update_preferences():
    return preferences_controller.update_preferences()

@api_bp.route('/switch-language/<lang>', methods=['GET'])
def switch_language(lang):
    return preferences_controller.switch_language(lang)


# --- Todo Endpoints ---
@api_bp.route('/todos', methods=['POST'])
def create_todo():
    return todo_controller.create_todo()

@api_bp.route('/todos/<todo_id>', methods=['PUT'])
def toggle_todo(todo_id):
    return todo_controller.toggle_todo(todo_id)

@api_bp.route('/todos/<todo_id>', methods=['DELETE'])
def delete_todo(todo_id):
    return todo_controller.delete_todo(todo_id)

# -*- coding: utf-8 -*-
"""French translations."""

FR_TRANSLATIONS = {
    # Session
    "error.session.missing": "Token d'authentification manquant",

    # API / transport
    "error.api.connection": "Erreur de connexion. Vérifiez votre connexion réseau.",
    "error.api.timeout": "Délai de connexion dépassé, veuillez réessayer.",
    "error.api.unauthorized": "Session expirée, veuillez vous reconnecter",
    "error.api.forbidden": "Accès non autorisé à cette ressource",
    "error.api.not_found": "Ressource non trouvée",
    "error.api.server": "Erreur serveur, veuillez réessayer plus tard",
    "error.api.http_status": "Erreur HTTP: {status}",
    "error.api.invalid_response": "Réponse invalide du serveur",
    "error.api.invalid_format": "Format de données invalide",
    "error.api.load_failed": "Erreur lors du chargement des données",
    "error.api.load_generic": "Une erreur est survenue lors du chargement",
    "error.api.generic": "Une erreur est survenue",

    # Surveyors
    "error.surveyor.not_found": "Topographe non trouvé",
    "error.surveyor.data_missing": "Données du topographe manquantes",
    "error.surveyor.delete_blocked": (
        "Ce topographe a {clients} client(s) et {staff} technicien(s) assigné(s). "
        "Réassignez-les avant de le supprimer."
    ),
    "error.cities.load_failed": "Impossible de charger les villes",
    "error.form.invalid": "Veuillez corriger les erreurs du formulaire",
    "error.form.invalid_payload": "Données du formulaire invalides",
    "error.list.superseded": "Requête remplacée par une requête plus récente",

    "surveyor.created": "Topographe créé avec succès",
    "surveyor.updated": "Topographe modifié avec succès",
    "surveyor.activated": "Topographe activé avec succès",
    "surveyor.deactivated": "Topographe désactivé avec succès",
    "surveyor.deleted": "Topographe supprimé avec succès",

    # Form validation
    "validation.username.required": "Le nom d'utilisateur est obligatoire",
    "validation.username.min_length": "Le nom d'utilisateur doit contenir au moins {min} caractères",
    "validation.email.required": "L'email est obligatoire",
    "validation.email.format": "Format d'email invalide",
    "validation.password.required": "Le mot de passe est obligatoire",
    "validation.password.min_length": "Le mot de passe doit contenir au moins {min} caractères",
    "validation.phone_number.required": "Le numéro de téléphone est obligatoire",
    "validation.phone_number.format": "Format de numéro de téléphone invalide",
    "validation.first_name.required": "Le prénom est obligatoire",
    "validation.last_name.required": "Le nom de famille est obligatoire",
    "validation.birthday.required": "La date de naissance est obligatoire",
    "validation.birthday.invalid": "Date de naissance invalide",
    "validation.birthday.past": "La date de naissance doit être dans le passé",
    "validation.cin.required": "Le CIN est obligatoire",
    "validation.city_id.required": "La ville est obligatoire",
    "validation.license_number.required": "Le numéro de licence est obligatoire",
    "validation.specialization.required": "La spécialisation est obligatoire",
}
